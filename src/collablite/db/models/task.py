"""Model for tasks table"""
from sqlalchemy import Boolean, Column, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship, validates

from collablite.db.models import validators
from collablite.db.models.base import Base, IDPrimaryKey, Timestamps, UTCDateTime


class Task(Base, IDPrimaryKey, Timestamps):
    __tablename__ = "task_task"
    title = Column(String(200), nullable=False)
    description = Column(Text)
    completed = Column(Boolean, nullable=False, default=False)
    project_id = Column(String(32), ForeignKey("project_project.id"), nullable=False)
    assignee_id = Column(String(32), ForeignKey("user_user.id"), nullable=True)
    due_date = Column(UTCDateTime)

    project = relationship("Project", lazy="raise")
    assignee = relationship("User", lazy="raise")

    __table_args__ = (
        Index("task_idx_project_completed", "project_id", "completed"),
        Index("task_idx_assignee", "assignee_id"),
    )

    @validates("title")
    def validate_title(self, key, value):
        return validators.trimmed_length("title", value, 3, 200)

    @validates("description")
    def validate_description(self, key, value):
        return validators.optional_max_length("description", value, 1000)
