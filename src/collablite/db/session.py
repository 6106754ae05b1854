import logging
import traceback
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from collablite.db.models import Base
from collablite.exceptions import DatabaseNotConnectedError
from collablite.log import mask_dsn

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the engine and the session factory. Open it once at startup with
    `connect`, hand it to whatever needs persistence, and `disconnect` on
    shutdown.
    """

    def __init__(self, dsn: str, *, echo: bool = False, **engine_kwargs):
        self.dsn = dsn
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        if self.is_connected:
            return
        logger.info("Connecting to database %s", mask_dsn(self.dsn))
        self.engine = create_async_engine(self.dsn, echo=self.echo, **self.engine_kwargs)
        self._session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def disconnect(self) -> None:
        if not self.is_connected:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database connection closed")

    async def create_all(self) -> None:
        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    def session(self) -> AsyncSession:
        if self._session_factory is None:
            raise DatabaseNotConnectedError("Database is not connected")
        return self._session_factory()

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """A session that is rolled back if the block raises."""
        async with self.session() as session:
            try:
                yield session
            except Exception as exc:
                logger.error(exc)
                logger.error(traceback.format_exc())
                await session.rollback()
                raise
            finally:
                await session.close()

    async def ping(self) -> bool:
        if not self.is_connected:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as exc:  # noqa: BLE001 - health probe only reports
            logger.warning("Database ping failed: %s", exc)
            return False
        return True

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise DatabaseNotConnectedError("Database is not connected")
        return self.engine
