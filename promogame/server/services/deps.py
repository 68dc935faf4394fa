"""
Request-scoped dependencies.

- ``get_store``: the repositories of the app's storage backend for one request
- ``require_admin``: guards admin endpoints with ``X-Admin-Key`` when configured
- ``PromotionServiceDep``: the service layer over the request store
"""

from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Header, Request

from promogame.core.errors import AdminAuthError
from promogame.core.security import secrets_match
from promogame.core.store.backends import StoreBackend
from promogame.core.store.interfaces import StoreBundle
from promogame.server.core.config import Settings, get_settings
from promogame.server.services.promotion import PromotionService


async def get_store(request: Request) -> AsyncGenerator[StoreBundle, None]:
    """
    Dependency generator for the store.

    Yields:
        StoreBundle: Repositories bound to one unit of work on the app's backend.
    """
    backend: StoreBackend = request.app.state.store_backend
    async with backend.session() as store:
        yield store


async def require_admin(
    settings: Annotated[Settings, Depends(get_settings)],
    x_admin_key: Annotated[Optional[str], Header()] = None,
) -> None:
    """Reject the request unless it carries the configured admin API key.

    Admin endpoints stay open when ``ADMIN_API_KEY`` is unset.
    """
    expected = settings.admin.api_key
    if expected is None:
        return
    if not secrets_match(x_admin_key, expected):
        raise AdminAuthError()


def get_promotion_service(
    store: Annotated[StoreBundle, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PromotionService:
    """Build the promotion service over the request's store."""
    return PromotionService(store, settings)


PromotionServiceDep = Annotated[PromotionService, Depends(get_promotion_service)]
AdminGuard = Depends(require_admin)
