"""Risks identified for a Project, scored by impact and probability."""
from datetime import datetime

from database import db
from utils.payload import isoformat

RISK_STRATEGY_DEFAULT = "accept"
RISK_STATUS_DEFAULT = "identified"


class Risk(db.Model):
    __tablename__ = "risks"

    id = db.Column(db.String(50), primary_key=True)
    project_id = db.Column(
        db.String(50),
        db.ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    impact = db.Column(db.Integer, nullable=False, default=1)
    probability = db.Column(db.Integer, nullable=False, default=1)
    mitigation_plan = db.Column(db.Text, nullable=False, default="")
    strategy = db.Column(db.String(50), nullable=False, default=RISK_STRATEGY_DEFAULT)
    status = db.Column(db.String(50), nullable=False, default=RISK_STATUS_DEFAULT)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    project = db.relationship("Project", back_populates="risks")

    def to_dict(self):
        return {
            "id": self.id,
            "project_id": self.project_id,
            "name": self.name,
            "description": self.description,
            "impact": self.impact,
            "probability": self.probability,
            "mitigation_plan": self.mitigation_plan,
            "strategy": self.strategy,
            "status": self.status,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Risk {self.id}>"
