from collablite.db.models.base import Base
from collablite.db.models.project import Project, project_members
from collablite.db.models.task import Task
from collablite.db.models.user import User

__all__ = ["Base", "Project", "Task", "User", "project_members"]
