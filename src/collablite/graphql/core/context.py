"""Defines context getter for fastapi route"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from strawberry.fastapi import BaseContext

from collablite.db.session import Database
from collablite.dependencies.db import get_database
from collablite.dependencies.settings import get_app_settings
from collablite.graphql.project.dataloaders import (
    MembersByProjectIdLoader,
    ProjectByIdLoader,
)
from collablite.graphql.user.dataloaders import UserByIdLoader
from collablite.settings import Settings, get_settings


@dataclass
class DataLoaders:
    user_by_id: UserByIdLoader
    project_by_id: ProjectByIdLoader
    members_by_project_id: MembersByProjectIdLoader

    @classmethod
    def create(cls, database: Database, settings: Settings) -> "DataLoaders":
        options = {
            "batch": settings.dataloader_batch,
            "max_batch_size": settings.dataloader_max_batch_size,
        }
        return cls(
            user_by_id=UserByIdLoader(database, **options),
            project_by_id=ProjectByIdLoader(database, **options),
            members_by_project_id=MembersByProjectIdLoader(database, **options),
        )


class Context(BaseContext):
    """Per request state. Loaders are created with it and die with it."""

    def __init__(self, database: Database, dataloaders: DataLoaders):
        super().__init__()
        self.database = database
        self.dataloaders = dataloaders

    @classmethod
    def create(cls, database: Database, settings: Optional[Settings] = None) -> "Context":
        settings = settings or get_settings()
        return cls(database=database, dataloaders=DataLoaders.create(database, settings))


async def get_context_for_fastapi(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
) -> Context:
    return Context.create(database, settings)
