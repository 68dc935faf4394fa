"""
Unit tests for the request logging middleware.

This test suite covers:
- Request/response processing and metrics forwarding
- Header injection
- Slow request detection
- Error logging and re-raising
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from promogame.server.middleware import RequestLoggingMiddleware

MODULE = "promogame.server.middleware.request_logging"


def make_request(method: str = "GET", path: str = "/api/settings"):
    mock_request = AsyncMock(spec=Request)
    mock_request.method = method
    mock_request.url.path = path
    mock_request.state = MagicMock()
    return mock_request


class TestRequestLoggingMiddlewareDispatch:
    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self):
        mock_response = Response(content="ok", status_code=200)

        async def call_next(request):
            return mock_response

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log:
            response = await middleware.dispatch(make_request(), call_next)

        assert response is mock_response
        mock_log.assert_called_once()
        kwargs = mock_log.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/settings"
        assert kwargs["status_code"] == 200
        assert kwargs["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_middleware_adds_process_time_header(self):
        async def call_next(request):
            return Response(content="ok", status_code=201)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request"):
            response = await middleware.dispatch(make_request("POST", "/api/register"), call_next)

        assert "X-Process-Time" in response.headers
        assert float(response.headers["X-Process-Time"]) >= 0

    @pytest.mark.asyncio
    async def test_middleware_logs_request_line(self):
        async def call_next(request):
            return Response(status_code=404)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request"), patch(f"{MODULE}.logger") as mock_logger:
            await middleware.dispatch(make_request("GET", "/api/user/status"), call_next)

        message = mock_logger.info.call_args[0][0]
        assert "GET /api/user/status -> 404" in message
        mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_middleware_warns_on_slow_request(self):
        async def call_next(request):
            return Response(status_code=200)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with (
            patch(f"{MODULE}.log_api_request"),
            patch(f"{MODULE}.logger") as mock_logger,
            patch(f"{MODULE}.time.time", side_effect=[0.0] + [2.5] * 5),
        ):
            await middleware.dispatch(make_request(), call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]
        assert mock_logger.warning.call_args.kwargs["extra"]["duration_ms"] == 2500.0


class TestRequestLoggingMiddlewareErrors:
    @pytest.mark.asyncio
    async def test_middleware_logs_and_reraises(self):
        async def call_next(request):
            raise RuntimeError("handler exploded")

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log, patch(f"{MODULE}.logger") as mock_logger:
            with pytest.raises(RuntimeError, match="handler exploded"):
                await middleware.dispatch(make_request("POST", "/api/payment"), call_next)

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["extra"]["error"] == "handler exploded"
        assert mock_log.call_args.kwargs["status_code"] == 500
