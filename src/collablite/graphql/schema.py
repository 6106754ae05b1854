"""Composes all queries and mutations and returns schema"""
from typing import Optional

import strawberry
from strawberry.extensions import QueryDepthLimiter

from collablite.graphql.project.mutations import Mutation as ProjectMutation
from collablite.graphql.project.schema import Query as ProjectQuery
from collablite.graphql.task.mutations import Mutation as TaskMutation
from collablite.graphql.task.schema import Query as TaskQuery
from collablite.graphql.user.mutations import Mutation as UserMutation
from collablite.graphql.user.schema import Query as UserQuery
from collablite.settings import Settings, get_settings


@strawberry.type
class Query(UserQuery, ProjectQuery, TaskQuery):
    """
    We have to inherit from every Query we want. Each module in this folder
    exposes Query, and we import that into this file, and add it just like
    UserQuery.
    """


@strawberry.type
class Mutation(UserMutation, ProjectMutation, TaskMutation):
    pass


def create_schema(settings: Optional[Settings] = None) -> strawberry.Schema:
    settings = settings or get_settings()
    max_depth = settings.max_query_depth
    return strawberry.Schema(
        Query,
        Mutation,
        # a factory, so every operation gets its own extension instance
        extensions=[lambda: QueryDepthLimiter(max_depth=max_depth)],
    )
