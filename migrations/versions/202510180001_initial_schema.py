"""create users, projects and project records"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "202510180001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _project_fk():
    return sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE")


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=120), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("full_name", sa.String(length=120), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "sprints",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("project_id", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False),
        *_timestamps(),
        _project_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("project_id", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False),
        sa.Column("priority", sa.String(length=50), nullable=False),
        sa.Column("responsible", sa.String(length=200), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("comments", sa.Text(), nullable=False),
        *_timestamps(),
        _project_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "sprint_tasks",
        sa.Column("sprint_id", sa.String(length=50), nullable=False),
        sa.Column("task_id", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["sprint_id"], ["sprints.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["task_id"], ["tasks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("sprint_id", "task_id"),
    )
    op.create_table(
        "risks",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("project_id", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("impact", sa.Integer(), nullable=False),
        sa.Column("probability", sa.Integer(), nullable=False),
        sa.Column("mitigation_plan", sa.Text(), nullable=False),
        sa.Column("strategy", sa.String(length=50), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False),
        *_timestamps(),
        _project_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "minutes",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("project_id", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("meeting_date", sa.Date(), nullable=False),
        *_timestamps(),
        _project_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "kanban_columns",
        sa.Column("id", sa.String(length=80), nullable=False),
        sa.Column("project_id", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False),
        *_timestamps(),
        _project_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    for table in ("sprints", "tasks", "risks", "minutes", "kanban_columns"):
        op.create_index(f"ix_{table}_project_id", table, ["project_id"])


def downgrade():
    for table in ("kanban_columns", "minutes", "risks", "tasks", "sprints"):
        op.drop_index(f"ix_{table}_project_id", table_name=table)
    op.drop_table("kanban_columns")
    op.drop_table("minutes")
    op.drop_table("risks")
    op.drop_table("sprint_tasks")
    op.drop_table("tasks")
    op.drop_table("sprints")
    op.drop_table("projects")
    op.drop_table("users")
