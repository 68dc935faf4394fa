"""
Game settings entity model.

Only the first row is ever read; saving updates it in place.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class GameSettingsEntity(Base, table=True):
    """Persistent game tuning row.

    Table: game_settings
    """

    __tablename__ = "game_settings"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    trial_speed: float
    trial_precision: float
    logged_in_speed: float
    logged_in_precision: float
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
