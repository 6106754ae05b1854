"""Model for projects table"""
from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship, validates

from collablite.db.models import validators
from collablite.db.models.base import Base, IDPrimaryKey, Timestamps

# The autoincrement id keeps members in the order they were added.
project_members = Table(
    "project_projectmember",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("project_id", String(32), ForeignKey("project_project.id"), nullable=False),
    Column("user_id", String(32), ForeignKey("user_user.id"), nullable=False),
    UniqueConstraint("project_id", "user_id"),
    Index("project_member_idx_user", "user_id"),
)


class Project(Base, IDPrimaryKey, Timestamps):
    __tablename__ = "project_project"
    name = Column(String(100), nullable=False)
    description = Column(Text)
    owner_id = Column(String(32), ForeignKey("user_user.id"), nullable=False, index=True)

    # lazy="raise": relationships are either eager loaded by the query that
    # fetched the project or resolved through a dataloader, never lazily.
    owner = relationship("User", lazy="raise")
    members = relationship(
        "User",
        secondary=project_members,
        order_by=project_members.c.id,
        lazy="raise",
    )

    @validates("name")
    def validate_name(self, key, value):
        return validators.trimmed_length("name", value, 3, 100)

    @validates("description")
    def validate_description(self, key, value):
        return validators.optional_max_length("description", value, 500)
