"""Database entities, one module per table."""

from .game_settings import GameSettingsEntity
from .users import UserEntity

__all__ = ["GameSettingsEntity", "UserEntity"]
