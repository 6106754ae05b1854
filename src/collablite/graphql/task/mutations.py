import logging

import strawberry
from sqlalchemy import delete, select
from strawberry.types import Info

from collablite.db.models import Project as ProjectModel
from collablite.db.models import Task as TaskModel
from collablite.db.models import User as UserModel
from collablite.db.models import project_members
from collablite.exceptions import InvalidInputError, NotFoundError
from collablite.graphql.task.types import (
    Task,
    TaskAssignInput,
    TaskCreateInput,
    TaskUpdateInput,
)

logger = logging.getLogger(__name__)


async def ensure_member(session, project_id: str, user_id: str) -> None:
    # Checked against the database, not the members dataloader, whose cache
    # may predate a membership change made earlier in the same request. The
    # same goes for the existence checks below.
    query = select(project_members.c.id).where(
        project_members.c.project_id == project_id,
        project_members.c.user_id == user_id,
    )
    res = await session.execute(query)
    if res.first() is None:
        raise InvalidInputError("Assignee must be a member of the project")


async def get_task(session, task_id) -> TaskModel:
    task = await session.get(TaskModel, str(task_id))
    if task is None:
        raise NotFoundError("Task not found")
    return task


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_task(self, info: Info, input: TaskCreateInput) -> Task:
        async with info.context.database.session_scope() as session:
            project = await session.get(ProjectModel, str(input.project_id))
            if project is None:
                raise NotFoundError("Project not found")
            assignee_id = None
            if input.assignee_id:
                assignee = await session.get(UserModel, str(input.assignee_id))
                if assignee is None:
                    raise NotFoundError("Assignee not found")
                assignee_id = assignee.id
                await ensure_member(session, project.id, assignee_id)
            task = TaskModel(
                title=input.title,
                description=input.description,
                project_id=project.id,
                assignee_id=assignee_id,
                due_date=input.due_date,
                completed=False,
            )
            session.add(task)
            await session.commit()
        logger.info("Created task %s in project %s", task.id, project.id)
        return task

    @strawberry.mutation
    async def update_task(self, info: Info, id: strawberry.ID, input: TaskUpdateInput) -> Task:
        async with info.context.database.session_scope() as session:
            task = await get_task(session, id)
            if input.title:
                task.title = input.title
            if input.description is not strawberry.UNSET:
                task.description = input.description
            if input.completed is not None:
                task.completed = input.completed
            if input.due_date is not strawberry.UNSET:
                task.due_date = input.due_date
            await session.commit()
        return task

    @strawberry.mutation
    async def delete_task(self, info: Info, id: strawberry.ID) -> bool:
        async with info.context.database.session_scope() as session:
            await session.execute(delete(TaskModel).where(TaskModel.id == str(id)))
            await session.commit()
        return True

    @strawberry.mutation
    async def toggle_task_completion(self, info: Info, id: strawberry.ID) -> Task:
        async with info.context.database.session_scope() as session:
            task = await get_task(session, id)
            task.completed = not task.completed
            await session.commit()
        return task

    @strawberry.mutation
    async def assign_task(self, info: Info, input: TaskAssignInput) -> Task:
        async with info.context.database.session_scope() as session:
            assignee = await session.get(UserModel, str(input.user_id))
            if assignee is None:
                raise NotFoundError("Assignee not found")
            task = await get_task(session, input.task_id)
            await ensure_member(session, task.project_id, assignee.id)
            task.assignee_id = assignee.id
            await session.commit()
        return task

    @strawberry.mutation
    async def unassign_task(self, info: Info, task_id: strawberry.ID) -> Task:
        async with info.context.database.session_scope() as session:
            task = await get_task(session, task_id)
            task.assignee_id = None
            await session.commit()
        return task
