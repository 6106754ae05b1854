"""
Resolution of reference fields (project owner and members, task project and
assignee).

A reference stored on a row is either already loaded on the parent object,
because the query that produced the parent eager loaded it, or only known by
its key. `stored_reference` turns what is stored into a `Reference`, and
`resolve` either hands back the loaded value or goes through a dataloader.
All four reference fields use the same rule.
"""
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union
from uuid import UUID

from sqlalchemy import inspect

from collablite.exceptions import InvalidReferenceError
from collablite.graphql.core.dataloader import canonical_key

T = TypeVar("T")

KEY_TYPES = (str, int, UUID)


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """The related entity (or list of entities) is already at hand."""

    value: T


@dataclass(frozen=True)
class Unresolved:
    """Only the canonical key of the related entity is known."""

    key: str


Reference = Optional[Union[Resolved, Unresolved]]


def has_identity(value: Any) -> bool:
    return getattr(value, "id", None) is not None


def to_reference(value: Any) -> Reference:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if all(has_identity(item) for item in value):
            return Resolved(list(value))
        raise InvalidReferenceError(
            "A reference collection must only hold entities with an id"
        )
    if has_identity(value):
        return Resolved(value)
    # bool is an int subclass but never a key
    if isinstance(value, KEY_TYPES) and not isinstance(value, bool):
        return Unresolved(canonical_key(value))
    raise InvalidReferenceError(
        f"Cannot resolve a reference stored as {type(value).__name__}"
    )


def stored_reference(instance: Any, relation: str, key_attr: str) -> Reference:
    """
    Reference for `relation` on a mapped instance. Uses the relationship when
    it was loaded with the instance, and the `key_attr` column otherwise.
    Never triggers a lazy load.
    """
    if relation not in inspect(instance).unloaded:
        loaded = getattr(instance, relation)
        if loaded is not None:
            return to_reference(loaded)
    return to_reference(getattr(instance, key_attr))


async def resolve(reference: Reference, loader) -> Any:
    if reference is None:
        return None
    if isinstance(reference, Resolved):
        return reference.value
    if isinstance(reference, Unresolved):
        return await loader.load(reference.key)
    raise InvalidReferenceError(f"Not a reference: {reference!r}")


async def resolve_project_owner(project, dataloaders):
    reference = stored_reference(project, "owner", "owner_id")
    return await resolve(reference, dataloaders.user_by_id)


async def resolve_project_members(project, dataloaders):
    # Members are looked up by the project's own id.
    reference = stored_reference(project, "members", "id")
    return await resolve(reference, dataloaders.members_by_project_id)


async def resolve_task_project(task, dataloaders):
    reference = stored_reference(task, "project", "project_id")
    return await resolve(reference, dataloaders.project_by_id)


async def resolve_task_assignee(task, dataloaders):
    reference = stored_reference(task, "assignee", "assignee_id")
    return await resolve(reference, dataloaders.user_by_id)
