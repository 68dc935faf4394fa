"""
Storage backends and their lifecycle.

A backend owns the long-lived resources (engine or HTTP client) and hands out
a :class:`StoreBundle` per request through :meth:`StoreBackend.session`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from promogame.core.database import build_sql_store, create_all, create_engine, create_sessionmaker

from .interfaces import StoreBundle
from .rest import RestTableClient, build_rest_store

if TYPE_CHECKING:
    from promogame.server.core.config import Settings

logger = logging.getLogger(__name__)


class StoreBackend(ABC):
    """Lifecycle of one storage backend."""

    name: str

    async def startup(self) -> None:
        """Prepare the backend before the first request."""

    @abstractmethod
    def session(self) -> "AsyncIterator[StoreBundle]":
        """Async context manager yielding the repositories for one unit of work."""

    @abstractmethod
    async def aclose(self) -> None:
        """Release engine or client resources."""


class SqlStoreBackend(StoreBackend):
    """Direct database access through async SQLAlchemy."""

    name = "sql"

    def __init__(self, engine: AsyncEngine, *, create_tables: bool = False) -> None:
        self.engine = engine
        self.session_factory = create_sessionmaker(engine)
        self.create_tables = create_tables

    async def startup(self) -> None:
        if self.create_tables:
            await create_all(self.engine)
            logger.info("Database tables created")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[StoreBundle]:
        async with self.session_factory() as db_session:
            yield build_sql_store(db_session)

    async def aclose(self) -> None:
        await self.engine.dispose()


class RestStoreBackend(StoreBackend):
    """Access through the hosted data API with one shared HTTP client."""

    name = "rest"

    def __init__(self, client: RestTableClient) -> None:
        self.client = client
        self._store = build_rest_store(client)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[StoreBundle]:
        yield self._store

    async def aclose(self) -> None:
        await self.client.aclose()


def build_store_backend(settings: "Settings", *, rest_client: Optional[RestTableClient] = None) -> StoreBackend:
    """Create the backend selected by ``STORE_BACKEND``.

    Raises:
        ValueError: ``rest`` was selected without ``SUPABASE_URL``/``SUPABASE_KEY``.
    """
    if settings.store_backend == "rest":
        if rest_client is None:
            supabase = settings.supabase
            if not supabase.url or not supabase.key:
                raise ValueError("STORE_BACKEND=rest requires SUPABASE_URL and SUPABASE_KEY")
            rest_client = RestTableClient(supabase.url, supabase.key, timeout=supabase.timeout)
        logger.info(f"Using hosted data API store at {rest_client.base_url}")
        return RestStoreBackend(rest_client)

    logger.info("Using SQL store")
    return SqlStoreBackend(create_engine(settings.database_url), create_tables=settings.database_create_tables)
