"""
SQL storage layer for PromoGame.

Talks to the managed Postgres directly (asyncpg) or to SQLite (aiosqlite)
for development and tests.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Repository implementations over an AsyncSession
- utils.py: Engine, session factory and repository bundle helpers
"""

from .base import Base
from .utils import (
    build_sql_store,
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "build_sql_store",
    "create_all",
    "create_engine",
    "create_sessionmaker",
]
