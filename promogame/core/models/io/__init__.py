"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and the web frontend. These models are separate from
storage entities to allow independent evolution of the wire format.

Modules:
- users: registration, login, payment and admin user I/O models
- game_settings: game tuning I/O models
"""

from .game_settings import (
    GameSettingsPayload,
    GameSettingsUpdate,
    GameSettingsUpdateResponse,
)
from .users import (
    LoginRequest,
    LoginResponse,
    PaymentRequest,
    PaymentRequestsResponse,
    PaymentResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateChancesRequest,
    UserIdRequest,
    UserRecord,
    UserStatusResponse,
    UserSummary,
    UserUpdateResponse,
    to_record,
    to_summary,
)

__all__ = [
    "GameSettingsPayload",
    "GameSettingsUpdate",
    "GameSettingsUpdateResponse",
    "LoginRequest",
    "LoginResponse",
    "PaymentRequest",
    "PaymentRequestsResponse",
    "PaymentResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UpdateChancesRequest",
    "UserIdRequest",
    "UserRecord",
    "UserStatusResponse",
    "UserSummary",
    "UserUpdateResponse",
    "to_record",
    "to_summary",
]
