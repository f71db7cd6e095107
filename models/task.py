"""A task represents a unit of work inside a Project

A Task belongs to exactly one Project
A Task can be planned in multiple Sprints (see sprint_tasks)
Status, priority and responsible are free text; the API only fills defaults

"""
from __future__ import annotations

from datetime import datetime

from database import db
from .sprint import sprint_tasks
from utils.payload import isoformat

TASK_STATUS_DEFAULT = "todo"
TASK_PRIORITY_DEFAULT = "medium"


class Task(db.Model):
    __tablename__ = "tasks"

    id = db.Column(db.String(50), primary_key=True)
    project_id = db.Column(
        db.String(50),
        db.ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.String(50), nullable=False, default=TASK_STATUS_DEFAULT)
    priority = db.Column(db.String(50), nullable=False, default=TASK_PRIORITY_DEFAULT)
    responsible = db.Column(db.String(200), nullable=False, default="")
    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)
    comments = db.Column(db.Text, nullable=False, default="")
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    project = db.relationship("Project", back_populates="tasks")
    sprints = db.relationship(
        "Sprint",
        secondary=sprint_tasks,
        back_populates="tasks",
        lazy="selectin",
        passive_deletes=True,
    )

    def in_sprint(self, sprint_id: str) -> bool:
        return any(sprint.id == sprint_id for sprint in self.sprints)

    def to_dict(self):
        return {
            "id": self.id,
            "project_id": self.project_id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "responsible": self.responsible,
            "start_date": isoformat(self.start_date),
            "end_date": isoformat(self.end_date),
            "comments": self.comments,
            "sprint_ids": sorted(sprint.id for sprint in self.sprints),
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Task {self.id}>"
