"""Storage backend on the hosted PostgREST-style data API."""

from .client import Filter, RestTableClient, eq, neq
from .repositories import RestGameSettingsRepository, RestUserRepository, build_rest_store

__all__ = [
    "Filter",
    "RestGameSettingsRepository",
    "RestTableClient",
    "RestUserRepository",
    "build_rest_store",
    "eq",
    "neq",
]
