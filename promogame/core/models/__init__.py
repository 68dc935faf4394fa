"""Domain models and API schemas."""

from __future__ import annotations

from .domain import (
    DEFAULT_GAME_SETTINGS,
    GameSettings,
    GameSettingsValues,
    NewUser,
    PaymentStatus,
    User,
    UserId,
)

__all__ = [
    "DEFAULT_GAME_SETTINGS",
    "GameSettings",
    "GameSettingsValues",
    "NewUser",
    "PaymentStatus",
    "User",
    "UserId",
]
