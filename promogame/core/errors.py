"""Error types raised by the service and storage layers.

Every error carries the HTTP status the API answers with, so the exception
handlers can render ``{"error": message}`` without a lookup table.
"""

from __future__ import annotations

from typing import Any, Optional


class PromoError(Exception):
    """Base error for promotion operations.

    Args:
        message: Human-readable error description returned to the client.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingFieldsError(PromoError):
    status_code = 400


class InvalidCredentialsError(PromoError):
    status_code = 401

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class AdminAuthError(PromoError):
    status_code = 401

    def __init__(self, message: str = "Admin authentication required") -> None:
        super().__init__(message)


class PaymentNotApprovedError(PromoError):
    status_code = 403

    def __init__(self, message: str = "Payment not approved. Please complete payment process.") -> None:
        super().__init__(message)


class UserNotFoundError(PromoError):
    status_code = 404

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class UserAlreadyExistsError(PromoError):
    status_code = 409

    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(message)


class StoreError(PromoError):
    """The store accepted a write but returned no row, or failed outright."""

    status_code = 500


class StoreApiError(StoreError):
    """HTTP failure talking to the hosted data API.

    Args:
        message: Human-readable error description.
        status_code: HTTP status returned by the data API, if any.
        details: Parsed error body from the data API, if any.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.upstream_status = status_code
        self.details = details
