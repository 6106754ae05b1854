from datetime import datetime
from enum import Enum
from typing import Optional

import strawberry
from sqlalchemy.sql.selectable import Select
from strawberry.types import Info

from collablite.db.models import Task as TaskModel
from collablite.graphql.core.resolution import resolve_task_assignee, resolve_task_project
from collablite.graphql.core.types import BaseSorter
from collablite.graphql.project.types import Project
from collablite.graphql.user.types import User


@strawberry.enum
class TasksSorterFields(str, Enum):
    CREATED_AT = "CREATED_AT"
    TITLE = "TITLE"
    DUE_DATE = "DUE_DATE"


@strawberry.input
class TasksSorter(BaseSorter):
    field: TasksSorterFields = TasksSorterFields.CREATED_AT

    def _add_sorters(self, query: Select) -> Select:
        sqla_sorter = self.get_sqlalchemy_sorter()
        columns = {
            TasksSorterFields.CREATED_AT: TaskModel.created_at,
            TasksSorterFields.TITLE: TaskModel.title,
            TasksSorterFields.DUE_DATE: TaskModel.due_date,
        }
        return query.order_by(sqla_sorter(columns[self.field]), TaskModel.id)


@strawberry.type
class Task:
    id: strawberry.ID
    title: str
    description: Optional[str]
    completed: bool
    due_date: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    @strawberry.field
    async def project(self, info: Info) -> Project:
        return await resolve_task_project(self, info.context.dataloaders)

    @strawberry.field
    async def assignee(self, info: Info) -> Optional[User]:
        return await resolve_task_assignee(self, info.context.dataloaders)


@strawberry.input
class TaskCreateInput:
    title: str
    project_id: strawberry.ID
    description: Optional[str] = None
    assignee_id: Optional[strawberry.ID] = None
    due_date: Optional[datetime] = None


@strawberry.input
class TaskUpdateInput:
    title: Optional[str] = None
    description: Optional[str] = strawberry.UNSET
    completed: Optional[bool] = None
    due_date: Optional[datetime] = strawberry.UNSET


@strawberry.input
class TaskAssignInput:
    task_id: strawberry.ID
    user_id: strawberry.ID
