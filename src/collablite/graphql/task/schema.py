from typing import List, Optional

import strawberry
from sqlalchemy import select
from strawberry.types import Info

from collablite.db.models import Task as TaskModel
from collablite.graphql.task.types import Task, TasksSorter


async def list_tasks(info: Info, *criteria, sort_by: Optional[TasksSorter] = None):
    sort_by = sort_by or TasksSorter()
    query = select(TaskModel)
    if criteria:
        query = query.where(*criteria)
    query = sort_by.add_sorters(query)
    async with info.context.database.session() as session:
        res = await session.execute(query)
        return res.scalars().all()


@strawberry.type
class Query:
    @strawberry.field
    async def tasks(self, info: Info, sort_by: Optional[TasksSorter] = None) -> List[Task]:
        return await list_tasks(info, sort_by=sort_by)

    @strawberry.field
    async def task(self, info: Info, id: strawberry.ID) -> Optional[Task]:
        async with info.context.database.session() as session:
            return await session.get(TaskModel, str(id))

    @strawberry.field
    async def project_tasks(self, info: Info, project_id: strawberry.ID) -> List[Task]:
        return await list_tasks(info, TaskModel.project_id == str(project_id))

    @strawberry.field
    async def user_tasks(self, info: Info, user_id: strawberry.ID) -> List[Task]:
        return await list_tasks(info, TaskModel.assignee_id == str(user_id))
