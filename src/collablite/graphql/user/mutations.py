import logging

import strawberry
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from strawberry.types import Info

from collablite.db.models import Project as ProjectModel
from collablite.db.models import Task as TaskModel
from collablite.db.models import User as UserModel
from collablite.db.models import project_members
from collablite.exceptions import InvalidInputError, NotFoundError
from collablite.graphql.project.mutations import delete_projects
from collablite.graphql.user.types import User, UserCreateInput, UserUpdateInput

logger = logging.getLogger(__name__)


async def commit_unique_email(session):
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise InvalidInputError("Email is already registered") from exc


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_user(self, info: Info, input: UserCreateInput) -> User:
        user = UserModel(username=input.username, email=input.email, password=input.password)
        async with info.context.database.session_scope() as session:
            session.add(user)
            await commit_unique_email(session)
        logger.info("Created user %s", user.id)
        return user

    @strawberry.mutation
    async def update_user(self, info: Info, id: strawberry.ID, input: UserUpdateInput) -> User:
        async with info.context.database.session_scope() as session:
            user = await session.get(UserModel, str(id))
            if user is None:
                raise NotFoundError("User not found")
            if input.username:
                user.username = input.username
            if input.email:
                user.email = input.email
            await commit_unique_email(session)
        return user

    @strawberry.mutation
    async def delete_user(self, info: Info, id: strawberry.ID) -> bool:
        """
        Removes the user's projects (with their tasks), their memberships and
        their task assignments, then the user.
        """
        user_id = str(id)
        async with info.context.database.session_scope() as session:
            owned = await session.execute(
                select(ProjectModel.id).where(ProjectModel.owner_id == user_id)
            )
            await delete_projects(session, owned.scalars().all())
            await session.execute(
                delete(project_members).where(project_members.c.user_id == user_id)
            )
            await session.execute(
                update(TaskModel)
                .where(TaskModel.assignee_id == user_id)
                .values(assignee_id=None)
            )
            await session.execute(delete(UserModel).where(UserModel.id == user_id))
            await session.commit()
        logger.info("Deleted user %s", user_id)
        return True
