"""A Project is the root record of the system.

A Project is identified by a caller-supplied, human-readable id (P1, P2, ...)
A Project always starts with the four default kanban columns
A Project owns its Sprints, Tasks, Risks, Minutes and Columns
Deleting a Project deletes everything it owns

"""
from datetime import datetime

from database import db
from utils.payload import isoformat

PROJECT_STATUS_DEFAULT = "active"


class Project(db.Model):
    __tablename__ = "projects"

    id = db.Column(db.String(50), primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    status = db.Column(db.String(50), nullable=False, default=PROJECT_STATUS_DEFAULT)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    # Children are removed by the database (ON DELETE CASCADE).
    sprints = db.relationship(
        "Sprint", back_populates="project", cascade="all, delete-orphan", passive_deletes=True
    )
    tasks = db.relationship(
        "Task", back_populates="project", cascade="all, delete-orphan", passive_deletes=True
    )
    risks = db.relationship(
        "Risk", back_populates="project", cascade="all, delete-orphan", passive_deletes=True
    )
    minutes = db.relationship(
        "Minutes", back_populates="project", cascade="all, delete-orphan", passive_deletes=True
    )
    columns = db.relationship(
        "KanbanColumn",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="KanbanColumn.order_index",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Project {self.id}>"
