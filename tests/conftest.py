"""Shared fixtures: a throwaway SQLite database, request contexts and seed data."""
import pytest
from sqlalchemy import insert

from collablite.db.models import Project, Task, User, project_members
from collablite.db.session import Database
from collablite.graphql.core.context import Context, DataLoaders
from collablite.graphql.project.dataloaders import (
    MembersByProjectIdLoader,
    ProjectByIdLoader,
)
from collablite.graphql.user.dataloaders import UserByIdLoader
from collablite.settings import Settings


class RecordingMixin:
    """Keeps the key list of every fetch that reached the database."""

    def __init__(self, *args, **kwargs):
        self.fetches = []
        super().__init__(*args, **kwargs)

    async def fetch(self, session, keys):
        self.fetches.append(list(keys))
        return await super().fetch(session, keys)


class RecordingUserLoader(RecordingMixin, UserByIdLoader):
    pass


class RecordingProjectLoader(RecordingMixin, ProjectByIdLoader):
    pass


class RecordingMembersLoader(RecordingMixin, MembersByProjectIdLoader):
    pass


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'collablite.db'}",
        environment="test",
    )


@pytest.fixture
async def database(settings):
    database = Database(settings.database_dsn)
    await database.connect()
    await database.create_all()
    yield database
    await database.disconnect()


@pytest.fixture
async def dataloaders(database):
    return DataLoaders(
        user_by_id=RecordingUserLoader(database),
        project_by_id=RecordingProjectLoader(database),
        members_by_project_id=RecordingMembersLoader(database),
    )


@pytest.fixture
async def context(database, dataloaders):
    return Context(database=database, dataloaders=dataloaders)


async def add_all(database, *objects):
    async with database.session() as session:
        session.add_all(objects)
        await session.commit()
    return objects


async def add_members(database, project_id, *user_ids):
    async with database.session() as session:
        for user_id in user_ids:
            await session.execute(
                insert(project_members).values(project_id=project_id, user_id=user_id)
            )
        await session.commit()


@pytest.fixture
async def seed(database):
    """
    alice owns "Apollo" with bob and carol as members. dave belongs to
    nothing. Apollo has one task assigned to bob and one unassigned.
    """
    alice = User(id="alice", username="alice", email="alice@example.com", password="secret1")
    bob = User(id="bob", username="bob", email="bob@example.com", password="secret2")
    carol = User(id="carol", username="carol", email="carol@example.com", password="secret3")
    dave = User(id="dave", username="dave", email="dave@example.com", password="secret4")
    await add_all(database, alice, bob, carol, dave)

    apollo = Project(id="apollo", name="Apollo", description="Moonshot", owner_id="alice")
    await add_all(database, apollo)
    await add_members(database, "apollo", "alice", "bob", "carol")

    landing = Task(id="landing", title="Land on the moon", project_id="apollo", assignee_id="bob")
    return_trip = Task(id="return", title="Come back", project_id="apollo")
    await add_all(database, landing, return_trip)
    return {
        "users": {"alice": alice, "bob": bob, "carol": carol, "dave": dave},
        "project": apollo,
        "tasks": {"landing": landing, "return": return_trip},
    }
