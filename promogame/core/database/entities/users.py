"""
User entity model.

This module contains the database entity for registered players, including
their entry-payment details and remaining game chances.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class UserEntity(Base, table=True):
    """Persistent player row.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(description="Display name")
    email: str = Field(unique=True, index=True, description="Login identifier")
    password: str = Field(description="Salted password digest")
    age_consent: Optional[bool] = Field(default=None, description="User confirmed the age requirement")
    game_chances: int = Field(default=0, description="Remaining plays")
    payment_status: str = Field(default="pending", index=True, description="pending|pending_approval|approved|denied")
    upi_id: Optional[str] = Field(default=None, description="Payer UPI handle")
    utr_number: Optional[str] = Field(default=None, description="Bank transaction reference")
    win: bool = Field(default=False, description="Whether the user has won")
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
