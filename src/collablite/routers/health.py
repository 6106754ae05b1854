from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from collablite.db.session import Database
from collablite.dependencies.db import get_database
from collablite.dependencies.settings import get_app_settings
from collablite.schemas.health import Health, ServiceInfo
from collablite.settings import Settings

router = APIRouter()


@router.get("/health", responses={status.HTTP_200_OK: {"model": Health}})
async def health(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
) -> Health:
    connected = await database.ping()
    return Health(
        status="ok",
        service=settings.service_name,
        database="connected" if connected else "disconnected",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
    )


@router.get("/", responses={status.HTTP_200_OK: {"model": ServiceInfo}})
async def root() -> ServiceInfo:
    return ServiceInfo(message="CollabLite GraphQL API", graphql="/graphql", health="/health")
