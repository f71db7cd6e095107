"""Import every model so the mappers and tables are registered together."""
from models.user import User
from models.project import Project
from models.sprint import Sprint, sprint_tasks
from models.task import Task
from models.risk import Risk
from models.minutes import Minutes
from models.kanban_column import KanbanColumn

__all__ = [
    "KanbanColumn",
    "Minutes",
    "Project",
    "Risk",
    "Sprint",
    "Task",
    "User",
    "sprint_tasks",
]
