"""
User I/O models for API requests and responses.

Request bodies keep the camelCase field names the web frontend sends
(``ageConsent``, ``userId``, ``gameChances``, ``upiId``, ``utrNumber``). Every
field is optional at the schema level; presence is checked by the service so
each endpoint can answer with its own message.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import User, UserId


class RegisterRequest(BaseModel):
    """Body of ``POST /api/register``."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    age_consent: Optional[bool] = Field(default=None, alias="ageConsent")


class LoginRequest(BaseModel):
    """Body of ``POST /api/login``."""

    email: Optional[str] = None
    password: Optional[str] = None


class UpdateChancesRequest(BaseModel):
    """Body of ``POST /api/user/update-chances``."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[UserId] = Field(default=None, alias="userId")
    game_chances: Optional[int] = Field(default=None, ge=0, alias="gameChances")


class UserIdRequest(BaseModel):
    """Body carrying only a user id (win, approve, deny)."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[UserId] = Field(default=None, alias="userId")


class PaymentRequest(BaseModel):
    """Body of ``POST /api/payment``."""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    upi_id: Optional[str] = Field(default=None, alias="upiId")
    utr_number: Optional[str] = Field(default=None, alias="utrNumber")


class UserSummary(BaseModel):
    """Public projection of a user returned by player-facing endpoints."""

    model_config = ConfigDict(from_attributes=True)

    id: UserId
    name: str
    email: str
    game_chances: int
    payment_status: str


class UserRecord(UserSummary):
    """Full user row without the password digest."""

    age_consent: Optional[bool] = None
    upi_id: Optional[str] = None
    utr_number: Optional[str] = None
    win: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RegisterResponse(BaseModel):
    message: str
    user: UserSummary


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    is_admin: bool = Field(alias="isAdmin")
    user: Optional[UserSummary] = None


class PaymentResponse(BaseModel):
    message: str
    user: UserSummary


class UserStatusResponse(BaseModel):
    status: str
    user: UserSummary


class UserUpdateResponse(BaseModel):
    """Response of endpoints that mutate a user and echo the whole row."""

    message: str
    user: UserRecord


class PaymentRequestsResponse(BaseModel):
    requests: List[UserRecord]


def to_summary(user: User) -> UserSummary:
    return UserSummary.model_validate(user)


def to_record(user: User) -> UserRecord:
    return UserRecord.model_validate(user)
