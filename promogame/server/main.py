"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers, includes all API routers and
optionally serves the web frontend. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from promogame.core.logging_config import get_logger, setup_logging
from promogame.core.monitoring import initialize_logfire
from promogame.core.store.backends import build_store_backend

from .api.v1 import admin, auth, game_settings, health, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the storage backend selected by ``STORE_BACKEND`` on startup and
    releases its engine or HTTP client on shutdown.
    """
    logger.info("Starting up PromoGame Server...")
    backend = build_store_backend(settings)
    try:
        await backend.startup()
        logger.info(f"Store backend '{backend.name}' ready")
    except Exception as e:
        logger.error(f"Store initialization failed: {e}", exc_info=True)
    app.state.store_backend = backend

    yield

    logger.info("Shutting down PromoGame Server...")
    await backend.aclose()


def mount_frontend(app: FastAPI, static_dir: Optional[str]) -> bool:
    """
    Serve the web frontend from ``static_dir`` at the site root.

    Mount it after every router so it never shadows the API routes. Returns
    whether the directory was mounted.
    """
    if not static_dir:
        return False
    static_path = Path(static_dir)
    if not static_path.is_dir():
        logger.warning(f"STATIC_DIR {static_path} is not a directory; static files disabled")
        return False
    app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
    logger.info(f"Serving static files from {static_path.resolve()}")
    return True


async def answer_options(request: Request, call_next: Callable) -> Response:
    """Answer any OPTIONS request that is not a CORS preflight with an empty 200."""
    if request.method == "OPTIONS":
        return Response(status_code=200)
    return await call_next(request)


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    PromoGame Server API

    Backend for the web game promotion: players register, submit UPI payment
    proof, and play once an admin approves the payment.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
# Innermost of the three; CORS answers real preflights before it
app.middleware("http")(answer_options)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=constant.API_PREFIX, tags=["auth"])
app.include_router(users.router, prefix=constant.API_PREFIX, tags=["users"])
app.include_router(game_settings.router, prefix=constant.API_PREFIX, tags=["settings"])
app.include_router(admin.router, prefix=f"{constant.API_PREFIX}/admin", tags=["admin"])

mount_frontend(app, settings.static_dir)
