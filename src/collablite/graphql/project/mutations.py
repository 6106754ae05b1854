import logging
from typing import Sequence

import strawberry
from sqlalchemy import delete, insert, select
from sqlalchemy.orm import selectinload
from strawberry.types import Info

from collablite.db.models import Project as ProjectModel
from collablite.db.models import Task as TaskModel
from collablite.db.models import User as UserModel
from collablite.db.models import project_members
from collablite.exceptions import InvalidInputError, NotFoundError
from collablite.graphql.project.types import (
    Project,
    ProjectCreateInput,
    ProjectMemberInput,
    ProjectUpdateInput,
)

logger = logging.getLogger(__name__)


async def get_project_with_members(session, project_id: str) -> ProjectModel:
    """
    Reload a project with its members eager loaded, so the `members` field
    returns them as they are now instead of going through the dataloader.
    """
    query = (
        select(ProjectModel)
        .where(ProjectModel.id == project_id)
        .options(selectinload(ProjectModel.members))
        .execution_options(populate_existing=True)
    )
    res = await session.execute(query)
    project = res.scalars().first()
    if project is None:
        raise NotFoundError("Project not found")
    return project


async def delete_projects(session, project_ids: Sequence[str]) -> None:
    """Delete projects together with their tasks and memberships. Does not commit."""
    if not project_ids:
        return
    await session.execute(delete(TaskModel).where(TaskModel.project_id.in_(project_ids)))
    await session.execute(
        delete(project_members).where(project_members.c.project_id.in_(project_ids))
    )
    await session.execute(delete(ProjectModel).where(ProjectModel.id.in_(project_ids)))


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_project(self, info: Info, input: ProjectCreateInput) -> Project:
        async with info.context.database.session_scope() as session:
            # existence checks read the database, the dataloader cache may
            # predate a delete made earlier in the same request
            owner = await session.get(UserModel, str(input.owner_id))
            if owner is None:
                raise NotFoundError("Owner not found")
            project = ProjectModel(
                name=input.name, description=input.description, owner_id=owner.id
            )
            session.add(project)
            await session.flush()
            # the owner is always the first member
            await session.execute(
                insert(project_members).values(project_id=project.id, user_id=owner.id)
            )
            await session.commit()
            project = await get_project_with_members(session, project.id)
        logger.info("Created project %s owned by %s", project.id, owner.id)
        return project

    @strawberry.mutation
    async def update_project(
        self, info: Info, id: strawberry.ID, input: ProjectUpdateInput
    ) -> Project:
        async with info.context.database.session_scope() as session:
            project = await session.get(ProjectModel, str(id))
            if project is None:
                raise NotFoundError("Project not found")
            if input.name:
                project.name = input.name
            if input.description is not strawberry.UNSET:
                project.description = input.description
            await session.commit()
        return project

    @strawberry.mutation
    async def delete_project(self, info: Info, id: strawberry.ID) -> bool:
        async with info.context.database.session_scope() as session:
            await delete_projects(session, [str(id)])
            await session.commit()
        logger.info("Deleted project %s", id)
        return True

    @strawberry.mutation
    async def add_project_member(self, info: Info, input: ProjectMemberInput) -> Project:
        """Adding someone who is already a member leaves the project as is."""
        project_id, user_id = str(input.project_id), str(input.user_id)
        async with info.context.database.session_scope() as session:
            if await session.get(UserModel, user_id) is None:
                raise NotFoundError("User not found")
            project = await get_project_with_members(session, project_id)
            if user_id not in {member.id for member in project.members}:
                await session.execute(
                    insert(project_members).values(project_id=project_id, user_id=user_id)
                )
                await session.commit()
                project = await get_project_with_members(session, project_id)
        return project

    @strawberry.mutation
    async def remove_project_member(self, info: Info, input: ProjectMemberInput) -> Project:
        project_id, user_id = str(input.project_id), str(input.user_id)
        async with info.context.database.session_scope() as session:
            project = await session.get(ProjectModel, project_id)
            if project is None:
                raise NotFoundError("Project not found")
            if project.owner_id == user_id:
                raise InvalidInputError("The project owner cannot be removed from its members")
            await session.execute(
                delete(project_members).where(
                    project_members.c.project_id == project_id,
                    project_members.c.user_id == user_id,
                )
            )
            await session.commit()
            project = await get_project_with_members(session, project_id)
        return project
