"""Kanban board columns of a Project.

Column ids are derived from the owning project: ``<project_id>-COL<n>``.
Every Project starts with DEFAULT_COLUMNS, flagged ``is_default``.
Columns are displayed by ``order_index`` ascending.

"""
import re
from datetime import datetime

from database import db
from utils.payload import isoformat

# (name, order_index) in board order
DEFAULT_COLUMNS = (
    ("To Do", 0),
    ("In Progress", 1),
    ("Blocked", 2),
    ("Done", 3),
)


def column_id_prefix(project_id: str) -> str:
    return f"{project_id}-COL"


def is_column_id(project_id: str, column_id: str) -> bool:
    """True when ``column_id`` follows the ``<project_id>-COL<n>`` scheme."""
    return re.fullmatch(rf"{re.escape(column_id_prefix(project_id))}\d+", column_id) is not None


class KanbanColumn(db.Model):
    __tablename__ = "kanban_columns"

    id = db.Column(db.String(80), primary_key=True)
    project_id = db.Column(
        db.String(50),
        db.ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(100), nullable=False)
    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_default = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    project = db.relationship("Project", back_populates="columns")

    def to_dict(self):
        return {
            "id": self.id,
            "project_id": self.project_id,
            "name": self.name,
            "order_index": self.order_index,
            "is_default": self.is_default,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<KanbanColumn {self.id}>"
