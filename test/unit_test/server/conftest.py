from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from promogame.core.store.backends import SqlStoreBackend
from promogame.server.core.config import Settings


@pytest_asyncio.fixture(name="client")
async def client_fixture(sql_backend: SqlStoreBackend, test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the in-memory store and test settings.

    The ASGI transport does not run the lifespan, so the backend is attached to
    ``app.state`` directly.
    """
    from promogame.server.core.config import get_settings
    from promogame.server.main import app

    app.state.store_backend = sql_backend
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
    del app.state.store_backend
