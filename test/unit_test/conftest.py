from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from promogame.core.database import build_sql_store, create_all, create_sessionmaker
from promogame.core.store.backends import SqlStoreBackend
from promogame.core.store.interfaces import StoreBundle
from promogame.server.core.config import Settings

# In-memory SQLite shared across connections of one engine
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_ADMIN_EMAIL = "admin@example.com"
TEST_ADMIN_PASSWORD = "adminpass"
TEST_PASSWORD_SALT = "test-salt"


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        admin_email=TEST_ADMIN_EMAIL,
        admin_password=TEST_ADMIN_PASSWORD,
        admin_api_key=None,
        password_salt=TEST_PASSWORD_SALT,
        approval_game_chances=3,
        store_backend="sql",
        database_url=TEST_DATABASE_URL,
    )


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest.fixture
def sql_store(session: AsyncSession) -> StoreBundle:
    return build_sql_store(session)


@pytest.fixture
def sql_backend(test_engine: AsyncEngine) -> SqlStoreBackend:
    return SqlStoreBackend(test_engine)
