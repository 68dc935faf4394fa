"""SQL implementations of the repository interfaces."""

from .game_settings import SqlGameSettingsRepository
from .users import SqlUserRepository

__all__ = ["SqlGameSettingsRepository", "SqlUserRepository"]
