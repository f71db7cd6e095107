"""A Sprint is a time-boxed iteration of a Project.

A Sprint belongs to exactly one Project
A Sprint can contain multiple Tasks and a Task can be planned in multiple Sprints
A Task appears at most once in a given Sprint

"""
from datetime import datetime

from database import db
from utils.payload import isoformat

SPRINT_STATUS_DEFAULT = "planning"

# Association table linking sprints and tasks
sprint_tasks = db.Table(
    "sprint_tasks",
    db.Column(
        "sprint_id",
        db.String(50),
        db.ForeignKey("sprints.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "task_id",
        db.String(50),
        db.ForeignKey("tasks.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column("created_at", db.DateTime, nullable=False, default=datetime.utcnow),
)


class Sprint(db.Model):
    __tablename__ = "sprints"

    id = db.Column(db.String(50), primary_key=True)
    project_id = db.Column(
        db.String(50),
        db.ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(200), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(50), nullable=False, default=SPRINT_STATUS_DEFAULT)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    project = db.relationship("Project", back_populates="sprints")
    tasks = db.relationship(
        "Task",
        secondary=sprint_tasks,
        back_populates="sprints",
        lazy="selectin",
        passive_deletes=True,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "project_id": self.project_id,
            "name": self.name,
            "start_date": isoformat(self.start_date),
            "end_date": isoformat(self.end_date),
            "status": self.status,
            "task_ids": sorted(task.id for task in self.tasks),
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Sprint {self.id}>"
