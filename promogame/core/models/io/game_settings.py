"""
Game settings I/O models.

The wire format uses camelCase (``trialSpeed`` ...) while storage uses
snake_case columns; these models translate between the two.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import GameSettingsValues


class GameSettingsPayload(BaseModel):
    """Game settings as exchanged with the frontend."""

    model_config = ConfigDict(populate_by_name=True)

    trial_speed: float = Field(alias="trialSpeed")
    trial_precision: float = Field(alias="trialPrecision")
    logged_in_speed: float = Field(alias="loggedInSpeed")
    logged_in_precision: float = Field(alias="loggedInPrecision")

    @classmethod
    def from_values(cls, values: GameSettingsValues) -> "GameSettingsPayload":
        return cls(
            trial_speed=values.trial_speed,
            trial_precision=values.trial_precision,
            logged_in_speed=values.logged_in_speed,
            logged_in_precision=values.logged_in_precision,
        )


class GameSettingsUpdate(BaseModel):
    """Body of ``POST /api/settings``; every field must be present."""

    model_config = ConfigDict(populate_by_name=True)

    trial_speed: Optional[float] = Field(default=None, alias="trialSpeed")
    trial_precision: Optional[float] = Field(default=None, alias="trialPrecision")
    logged_in_speed: Optional[float] = Field(default=None, alias="loggedInSpeed")
    logged_in_precision: Optional[float] = Field(default=None, alias="loggedInPrecision")


class GameSettingsUpdateResponse(BaseModel):
    message: str
    settings: GameSettingsPayload
