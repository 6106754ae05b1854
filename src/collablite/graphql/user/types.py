from datetime import datetime
from enum import Enum
from typing import Optional

import strawberry
from sqlalchemy.sql.selectable import Select

from collablite.db.models import User as UserModel
from collablite.graphql.core.types import BaseSorter


@strawberry.enum
class UsersSorterFields(str, Enum):
    CREATED_AT = "CREATED_AT"
    USERNAME = "USERNAME"


@strawberry.input
class UsersSorter(BaseSorter):
    field: UsersSorterFields = UsersSorterFields.CREATED_AT

    def _add_sorters(self, query: Select) -> Select:
        sqla_sorter = self.get_sqlalchemy_sorter()
        columns = {
            UsersSorterFields.CREATED_AT: UserModel.created_at,
            UsersSorterFields.USERNAME: UserModel.username,
        }
        return query.order_by(sqla_sorter(columns[self.field]), UserModel.id)


@strawberry.type
class User:
    id: strawberry.ID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


@strawberry.input
class UserCreateInput:
    username: str
    email: str
    password: str


@strawberry.input
class UserUpdateInput:
    username: Optional[str] = None
    email: Optional[str] = None
