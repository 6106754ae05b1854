"""Main api module for the app"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from collablite.db.session import Database
from collablite.exception_handler import default_exception_handler
from collablite.graphql.core.context import get_context_for_fastapi
from collablite.graphql.schema import create_schema
from collablite.routers import health
from collablite.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    database = database or Database(settings.database_dsn, echo=settings.database_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.connect()
        if settings.create_tables:
            await database.create_all()
        logger.info("CollabLite started (%s)", settings.environment)
        try:
            yield
        finally:
            await database.disconnect()
            logger.info("CollabLite stopped")

    app = FastAPI(title="CollabLite", debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.add_exception_handler(Exception, default_exception_handler)

    # add middlewares
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_headers=["Content-Type", "Authorization"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    )

    # add routes
    app.include_router(health.router, tags=["Health"])

    # graphql route
    graphql_app = GraphQLRouter(create_schema(settings), context_getter=get_context_for_fastapi)
    app.include_router(graphql_app, prefix="/graphql")
    return app
