from uuid import UUID

import pytest

from collablite.db.models import Project, Task, User
from collablite.exceptions import InvalidReferenceError
from collablite.graphql.core.context import DataLoaders
from collablite.graphql.core.resolution import (
    Resolved,
    Unresolved,
    resolve,
    resolve_project_members,
    resolve_project_owner,
    resolve_task_assignee,
    resolve_task_project,
    stored_reference,
    to_reference,
)


class FakeLoader:
    def __init__(self, values=None):
        self.values = values or {}
        self.calls = []

    async def load(self, key):
        self.calls.append(key)
        return self.values.get(key)


def make_user(id="u1", username="alice"):
    return User(id=id, username=username, email=f"{username}@example.com", password="secret")


@pytest.fixture
def alice():
    return make_user()


@pytest.fixture
def loaders(alice):
    return DataLoaders(
        user_by_id=FakeLoader({"u1": alice}),
        project_by_id=FakeLoader(),
        members_by_project_id=FakeLoader({"p1": [alice]}),
    )


async def test_embedded_owner_is_returned_without_loading(alice, loaders):
    project = Project(id="p1", name="Apollo", owner_id="u1", owner=alice)

    owner = await resolve_project_owner(project, loaders)

    assert owner is alice
    assert loaders.user_by_id.calls == []


async def test_bare_owner_key_goes_through_the_loader_once(alice, loaders):
    project = Project(id="p1", name="Apollo", owner_id="u1")

    owner = await resolve_project_owner(project, loaders)

    assert owner is alice
    assert loaders.user_by_id.calls == ["u1"]


async def test_members_embedded_or_loaded(alice, loaders):
    bob = make_user("u2", "bob")
    embedded = Project(id="p1", name="Apollo", owner_id="u1", members=[alice, bob])
    bare = Project(id="p1", name="Apollo", owner_id="u1")

    assert await resolve_project_members(embedded, loaders) == [alice, bob]
    assert loaders.members_by_project_id.calls == []

    assert await resolve_project_members(bare, loaders) == [alice]
    assert loaders.members_by_project_id.calls == ["p1"]


async def test_embedded_empty_member_list_is_not_refetched(loaders):
    project = Project(id="p1", name="Apollo", owner_id="u1", members=[])

    assert await resolve_project_members(project, loaders) == []
    assert loaders.members_by_project_id.calls == []


async def test_unset_assignee_short_circuits(loaders):
    task = Task(id="t1", title="Write docs", project_id="p1")

    assert await resolve_task_assignee(task, loaders) is None
    assert loaders.user_by_id.calls == []


async def test_assignee_and_project_by_key(alice, loaders):
    task = Task(id="t1", title="Write docs", project_id="p1", assignee_id="u1")

    assert await resolve_task_assignee(task, loaders) is alice
    assert await resolve_task_project(task, loaders) is None
    assert loaders.user_by_id.calls == ["u1"]
    assert loaders.project_by_id.calls == ["p1"]


def test_to_reference_canonicalizes_keys():
    uuid = UUID("12345678123456781234567812345678")
    assert to_reference(7) == Unresolved("7")
    assert to_reference("7") == Unresolved("7")
    assert to_reference(uuid) == Unresolved(str(uuid))
    assert to_reference(None) is None


def test_to_reference_wraps_entities(alice):
    assert to_reference(alice) == Resolved(alice)
    assert to_reference([alice]) == Resolved([alice])


@pytest.mark.parametrize("value", [object(), True, 1.5, {"id": None}, [1, 2]])
def test_to_reference_rejects_other_shapes(value):
    with pytest.raises(InvalidReferenceError):
        to_reference(value)


def test_stored_reference_prefers_loaded_relationship(alice):
    assert stored_reference(Task(project_id="p1", assignee=alice), "assignee", "assignee_id") == Resolved(alice)
    assert stored_reference(Task(project_id="p1"), "project", "project_id") == Unresolved("p1")


async def test_resolve_rejects_non_references():
    with pytest.raises(InvalidReferenceError):
        await resolve("u1", FakeLoader())
