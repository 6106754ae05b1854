from typing import List, Optional

import strawberry
from sqlalchemy import select
from strawberry.types import Info

from collablite.db.models import User as UserModel
from collablite.graphql.user.types import User, UsersSorter


@strawberry.type
class Query:
    @strawberry.field
    async def users(self, info: Info, sort_by: Optional[UsersSorter] = None) -> List[User]:
        sort_by = sort_by or UsersSorter()
        async with info.context.database.session() as session:
            res = await session.execute(sort_by.add_sorters(select(UserModel)))
            return res.scalars().all()

    @strawberry.field
    async def user(self, info: Info, id: strawberry.ID) -> Optional[User]:
        return await info.context.dataloaders.user_by_id.load(id)
