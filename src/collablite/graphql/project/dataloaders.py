from sqlalchemy import select
from sqlalchemy.orm import selectinload

from collablite.db.models import Project
from collablite.graphql.core.dataloader import DataLoader


class ProjectByIdLoader(DataLoader):
    async def fetch(self, session, keys):
        res = await session.execute(select(Project).where(Project.id.in_(keys)))
        return res.scalars().all()


class MembersByProjectIdLoader(DataLoader):
    """Resolves a project id to its members, in the order they joined."""

    async def fetch(self, session, keys):
        query = (
            select(Project)
            .where(Project.id.in_(keys))
            .options(selectinload(Project.members))
        )
        res = await session.execute(query)
        return res.scalars().all()

    def shape(self, record):
        return list(record.members)

    def missing_value(self):
        return []
