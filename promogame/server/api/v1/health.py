"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification.
"""

from fastapi import APIRouter, Request

from promogame.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns a simple status indicator and the active storage backend.
    """
    backend = getattr(request.app.state, "store_backend", None)
    return {"status": "ok", "store": backend.name if backend is not None else None}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    return {"version": constant.VERSION}
