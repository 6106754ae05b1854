from sqlalchemy import select

from collablite.db.models import User
from collablite.graphql.core.dataloader import DataLoader


class UserByIdLoader(DataLoader):
    async def fetch(self, session, keys):
        res = await session.execute(select(User).where(User.id.in_(keys)))
        return res.scalars().all()
