"""
Unit tests for server exception handlers.

Tests cover the ``{"error": ...}`` rendering of domain errors, framework HTTP
errors, request validation failures and unhandled exceptions.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from promogame.core.errors import (
    MissingFieldsError,
    PaymentNotApprovedError,
    PromoError,
    StoreApiError,
    StoreError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from promogame.server.exception_handlers import setup_exception_handlers
from promogame.server.exception_handlers.global_handler import (
    INVALID_BODY_MESSAGE,
    global_exception_handler,
    http_exception_handler,
    promo_error_handler,
    validation_exception_handler,
)

MODULE = "promogame.server.exception_handlers.global_handler"


def body_of(response: JSONResponse) -> dict:
    return json.loads(response.body.decode())


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "POST"
    request.url.path = "/api/register"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestPromoErrorHandler:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc,status,message",
        [
            (MissingFieldsError("Email is required"), 400, "Email is required"),
            (PaymentNotApprovedError(), 403, "Payment not approved. Please complete payment process."),
            (UserNotFoundError(), 404, "User not found"),
            (UserAlreadyExistsError(), 409, "User already exists"),
        ],
    )
    async def test_domain_errors_use_their_status(self, mock_request, exc, status, message):
        response = await promo_error_handler(mock_request, exc)

        assert response.status_code == status
        assert body_of(response) == {"error": message}

    @pytest.mark.asyncio
    async def test_store_errors_are_prefixed(self, mock_request):
        with patch(f"{MODULE}.logger") as mock_logger:
            response = await promo_error_handler(mock_request, StoreError("Failed to update game settings"))

        assert response.status_code == 500
        assert body_of(response) == {"error": "Internal server error: Failed to update game settings"}
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_store_api_error_keeps_500(self, mock_request):
        exc = StoreApiError("Data API GET users failed: 503", status_code=503)

        with patch(f"{MODULE}.logger"):
            response = await promo_error_handler(mock_request, exc)

        assert response.status_code == 500
        assert body_of(response)["error"].startswith("Internal server error: ")


class TestFrameworkErrorHandlers:
    @pytest.mark.asyncio
    async def test_http_exception_rendered_as_error(self, mock_request):
        response = await http_exception_handler(mock_request, StarletteHTTPException(status_code=405))

        assert response.status_code == 405
        assert body_of(response) == {"error": "Method Not Allowed"}

    @pytest.mark.asyncio
    async def test_validation_error_is_400(self, mock_request):
        exc = RequestValidationError([{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}])

        response = await validation_exception_handler(mock_request, exc)

        assert response.status_code == 400
        assert body_of(response) == {"error": INVALID_BODY_MESSAGE}


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch(f"{MODULE}.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["path"] == "/api/register"

    @pytest.mark.asyncio
    async def test_exception_handler_response(self, mock_request):
        exc = RuntimeError("Test error")

        with patch(f"{MODULE}.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = body_of(response)
        assert body["error"] == "Internal server error"
        assert body["error_id"] == id(exc)
        assert body["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_exception_handler_without_client(self, mock_request):
        mock_request.client = None

        with patch(f"{MODULE}.logger") as mock_logger:
            await global_exception_handler(mock_request, KeyError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestSetupExceptionHandlers:
    def test_handlers_registered(self):
        app = FastAPI()

        setup_exception_handlers(app)

        assert app.exception_handlers[PromoError] is promo_error_handler
        assert app.exception_handlers[StarletteHTTPException] is http_exception_handler
        assert app.exception_handlers[RequestValidationError] is validation_exception_handler
        assert app.exception_handlers[Exception] is global_exception_handler
