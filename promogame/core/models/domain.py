"""
Domain models shared by the storage backends and the service layer.

Both the SQL repositories and the hosted REST repositories return these
objects, so the service layer never sees ORM entities or raw rows.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

UserId = Union[int, str]

INT4_MAX = 2**31 - 1
INT8_MAX = 2**63 - 1


def row_id(user_id: UserId, max_value: int = INT8_MAX) -> Optional[int]:
    """Integer key named by an API-supplied id, or None when no row can match.

    Booleans, non-numeric strings and values outside the signed range of the
    key column are never valid keys.
    """
    if isinstance(user_id, bool):
        return None
    try:
        value = int(user_id)
    except (TypeError, ValueError):
        return None
    if not -max_value - 1 <= value <= max_value:
        return None
    return value


class PaymentStatus(str, Enum):
    """Lifecycle labels of a user's entry payment."""

    pending = "pending"
    pending_approval = "pending_approval"
    approved = "approved"
    denied = "denied"


class NewUser(BaseModel):
    """Fields supplied when registering a user."""

    name: str
    email: str
    password_hash: str
    age_consent: Optional[bool] = None


class User(BaseModel):
    """A registered player as persisted in the ``users`` table."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UserId
    name: str
    email: str
    password: str = Field(repr=False, description="Salted password digest")
    age_consent: Optional[bool] = None
    game_chances: int = 0
    payment_status: str = PaymentStatus.pending.value
    upi_id: Optional[str] = None
    utr_number: Optional[str] = None
    win: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_approved(self) -> bool:
        return self.payment_status == PaymentStatus.approved.value


class GameSettingsValues(BaseModel):
    """The four tuning knobs of the game."""

    trial_speed: float
    trial_precision: float
    logged_in_speed: float
    logged_in_precision: float


class GameSettings(GameSettingsValues):
    """The persisted settings row."""

    model_config = ConfigDict(from_attributes=True)

    id: UserId
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


DEFAULT_GAME_SETTINGS = GameSettingsValues(
    trial_speed=10,
    trial_precision=1,
    logged_in_speed=10,
    logged_in_precision=1,
)
