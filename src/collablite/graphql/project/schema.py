from typing import List, Optional

import strawberry
from sqlalchemy import or_, select
from strawberry.types import Info

from collablite.db.models import Project as ProjectModel
from collablite.db.models import project_members
from collablite.graphql.project.types import Project, ProjectsSorter


@strawberry.type
class Query:
    @strawberry.field
    async def projects(
        self, info: Info, sort_by: Optional[ProjectsSorter] = None
    ) -> List[Project]:
        sort_by = sort_by or ProjectsSorter()
        async with info.context.database.session() as session:
            res = await session.execute(sort_by.add_sorters(select(ProjectModel)))
            return res.scalars().all()

    @strawberry.field
    async def project(self, info: Info, id: strawberry.ID) -> Optional[Project]:
        return await info.context.dataloaders.project_by_id.load(id)

    @strawberry.field
    async def user_projects(self, info: Info, user_id: strawberry.ID) -> List[Project]:
        """Projects the user owns or is a member of, newest first."""
        user_id = str(user_id)
        membership = select(project_members.c.project_id).where(
            project_members.c.user_id == user_id
        )
        query = ProjectsSorter().add_sorters(
            select(ProjectModel).where(
                or_(ProjectModel.owner_id == user_id, ProjectModel.id.in_(membership))
            )
        )
        async with info.context.database.session() as session:
            res = await session.execute(query)
            return res.scalars().all()
