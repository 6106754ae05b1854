from datetime import datetime
from enum import Enum
from typing import List, Optional

import strawberry
from sqlalchemy.sql.selectable import Select
from strawberry.types import Info

from collablite.db.models import Project as ProjectModel
from collablite.graphql.core.resolution import (
    resolve_project_members,
    resolve_project_owner,
)
from collablite.graphql.core.types import BaseSorter
from collablite.graphql.user.types import User


@strawberry.enum
class ProjectsSorterFields(str, Enum):
    CREATED_AT = "CREATED_AT"
    NAME = "NAME"


@strawberry.input
class ProjectsSorter(BaseSorter):
    field: ProjectsSorterFields = ProjectsSorterFields.CREATED_AT

    def _add_sorters(self, query: Select) -> Select:
        sqla_sorter = self.get_sqlalchemy_sorter()
        columns = {
            ProjectsSorterFields.CREATED_AT: ProjectModel.created_at,
            ProjectsSorterFields.NAME: ProjectModel.name,
        }
        return query.order_by(sqla_sorter(columns[self.field]), ProjectModel.id)


@strawberry.type
class Project:
    id: strawberry.ID
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    @strawberry.field
    async def owner(self, info: Info) -> User:
        return await resolve_project_owner(self, info.context.dataloaders)

    @strawberry.field
    async def members(self, info: Info) -> List[User]:
        return await resolve_project_members(self, info.context.dataloaders)


@strawberry.input
class ProjectCreateInput:
    name: str
    owner_id: strawberry.ID
    description: Optional[str] = None


@strawberry.input
class ProjectUpdateInput:
    name: Optional[str] = None
    description: Optional[str] = strawberry.UNSET


@strawberry.input
class ProjectMemberInput:
    project_id: strawberry.ID
    user_id: strawberry.ID
