"""
Repository implementations on the hosted data API.

Rows come back as JSON objects whose keys match the table columns, so they
validate straight into the domain models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from promogame.core.errors import StoreApiError, UserAlreadyExistsError
from promogame.core.models.domain import (
    GameSettings,
    GameSettingsValues,
    NewUser,
    PaymentStatus,
    User,
    UserId,
    row_id,
)
from promogame.core.store.interfaces import GameSettingsRepository, StoreBundle, UserRepository

from .client import RestTableClient, eq, neq

USERS_TABLE = "users"
GAME_SETTINGS_TABLE = "game_settings"

UNIQUE_VIOLATION = "23505"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _first(rows: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    return rows[0] if rows else None


def _is_unique_violation(error: StoreApiError) -> bool:
    if error.upstream_status == 409:
        return True
    return isinstance(error.details, dict) and error.details.get("code") == UNIQUE_VIOLATION


class RestUserRepository(UserRepository):
    """User data access through the hosted table API."""

    def __init__(self, client: RestTableClient) -> None:
        self.client = client

    async def _one(self, *filters) -> Optional[User]:
        row = _first(await self.client.select(USERS_TABLE, *filters, limit=1))
        return User.model_validate(row) if row else None

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._one(eq("email", email))

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        key = row_id(user_id)
        if key is None:
            return None
        return await self._one(eq("id", key))

    async def create(self, new_user: NewUser) -> User:
        now = _now_iso()
        row = {
            "name": new_user.name,
            "email": new_user.email,
            "password": new_user.password_hash,
            "age_consent": new_user.age_consent,
            "game_chances": 0,
            "payment_status": PaymentStatus.pending.value,
            "created_at": now,
            "updated_at": now,
        }
        try:
            rows = await self.client.insert(USERS_TABLE, [row])
        except StoreApiError as e:
            if _is_unique_violation(e):
                raise UserAlreadyExistsError() from e
            raise
        created = _first(rows)
        if created is None:
            raise StoreApiError("Failed to create user")
        return User.model_validate(created)

    async def _update(self, changes: Dict[str, Any], *filters) -> Optional[User]:
        values = {**changes, "updated_at": _now_iso()}
        row = _first(await self.client.update(USERS_TABLE, values, *filters))
        return User.model_validate(row) if row else None

    async def update(self, user_id: UserId, changes: Dict[str, Any]) -> Optional[User]:
        key = row_id(user_id)
        if key is None:
            return None
        return await self._update(changes, eq("id", key))

    async def update_by_email(self, email: str, changes: Dict[str, Any]) -> Optional[User]:
        return await self._update(changes, eq("email", email))

    async def list_payment_requests(self) -> List[User]:
        rows = await self.client.select(
            USERS_TABLE,
            neq("payment_status", PaymentStatus.pending.value),
            order="updated_at.desc",
        )
        return [User.model_validate(row) for row in rows]


class RestGameSettingsRepository(GameSettingsRepository):
    """Game settings access through the hosted table API."""

    def __init__(self, client: RestTableClient) -> None:
        self.client = client

    async def get_current(self) -> Optional[GameSettings]:
        row = _first(await self.client.select(GAME_SETTINGS_TABLE, limit=1))
        return GameSettings.model_validate(row) if row else None

    async def save(self, values: GameSettingsValues) -> GameSettings:
        existing = await self.get_current()
        now = _now_iso()
        if existing is not None:
            rows = await self.client.update(
                GAME_SETTINGS_TABLE, {**values.model_dump(), "updated_at": now}, eq("id", existing.id)
            )
        else:
            rows = await self.client.insert(
                GAME_SETTINGS_TABLE, [{**values.model_dump(), "created_at": now, "updated_at": now}]
            )
        saved = _first(rows)
        if saved is None:
            raise StoreApiError("Failed to update game settings")
        return GameSettings.model_validate(saved)


def build_rest_store(client: RestTableClient) -> StoreBundle:
    return StoreBundle(
        users=RestUserRepository(client),
        game_settings=RestGameSettingsRepository(client),
    )
