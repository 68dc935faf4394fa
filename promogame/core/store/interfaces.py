"""
Repository interfaces shared by every storage backend.

The service layer depends only on these abstract classes. ``core.database``
implements them on async SQLAlchemy sessions and ``core.store.rest``
implements them on the hosted data API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from promogame.core.models.domain import GameSettings, GameSettingsValues, NewUser, User, UserId


class UserRepository(ABC):
    """Data access for the ``users`` table."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get the user registered with ``email``.

        Args:
            email: Exact email address

        Returns:
            User or None if not found
        """

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get a user by primary key.

        Args:
            user_id: Primary key value

        Returns:
            User or None if not found
        """

    @abstractmethod
    async def create(self, new_user: NewUser) -> User:
        """Insert a user with zero game chances and ``pending`` payment status.

        Raises:
            UserAlreadyExistsError: The email is already registered
        """

    @abstractmethod
    async def update(self, user_id: UserId, changes: Dict[str, Any]) -> Optional[User]:
        """Apply ``changes`` to the user with ``user_id`` and refresh ``updated_at``.

        Returns:
            The updated user or None if no row matched
        """

    @abstractmethod
    async def update_by_email(self, email: str, changes: Dict[str, Any]) -> Optional[User]:
        """Same as :meth:`update` but matching on email."""

    @abstractmethod
    async def list_payment_requests(self) -> List[User]:
        """Users whose payment status is not ``pending``, newest update first."""


class GameSettingsRepository(ABC):
    """Data access for the singleton ``game_settings`` row."""

    @abstractmethod
    async def get_current(self) -> Optional[GameSettings]:
        """Return the first settings row, or None when none was saved yet."""

    @abstractmethod
    async def save(self, values: GameSettingsValues) -> GameSettings:
        """Update the current row in place, or insert one if none exists."""


@dataclass(frozen=True)
class StoreBundle:
    """Convenience bundle of repositories for dependency injection."""

    users: UserRepository
    game_settings: GameSettingsRepository
