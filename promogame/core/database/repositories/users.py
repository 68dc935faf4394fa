"""
User repository implementation on async SQLAlchemy sessions.

This module provides data access operations for registered players:
lookup by email or id, registration, field updates and the admin listing
of submitted payments. Built on SQLModel for type-safe ORM operations.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from promogame.core.errors import UserAlreadyExistsError
from promogame.core.models.domain import INT4_MAX, NewUser, PaymentStatus, User, UserId, row_id
from promogame.core.store.interfaces import UserRepository

from ..base import utc_now
from ..entities.users import UserEntity


def _as_pk(user_id: UserId) -> Optional[int]:
    """Coerce an API-supplied id to the int4 primary key, None if impossible."""
    return row_id(user_id, max_value=INT4_MAX)


class SqlUserRepository(UserRepository):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        self.session = session

    async def _get_entity(self, user_id: UserId) -> Optional[UserEntity]:
        pk = _as_pk(user_id)
        if pk is None:
            return None
        return await self.session.get(UserEntity, pk)

    async def _get_entity_by_email(self, email: str) -> Optional[UserEntity]:
        stmt = select(UserEntity).where(UserEntity.email == email)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_email(self, email: str) -> Optional[User]:
        entity = await self._get_entity_by_email(email)
        return User.model_validate(entity) if entity else None

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        entity = await self._get_entity(user_id)
        return User.model_validate(entity) if entity else None

    async def create(self, new_user: NewUser) -> User:
        now = utc_now()
        entity = UserEntity(
            name=new_user.name,
            email=new_user.email,
            password=new_user.password_hash,
            age_consent=new_user.age_consent,
            game_chances=0,
            payment_status=PaymentStatus.pending.value,
            created_at=now,
            updated_at=now,
        )
        self.session.add(entity)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise UserAlreadyExistsError() from e
        await self.session.refresh(entity)
        return User.model_validate(entity)

    async def _apply(self, entity: Optional[UserEntity], changes: Dict[str, Any]) -> Optional[User]:
        if entity is None:
            return None
        for key, value in changes.items():
            setattr(entity, key, value)
        entity.updated_at = utc_now()
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return User.model_validate(entity)

    async def update(self, user_id: UserId, changes: Dict[str, Any]) -> Optional[User]:
        return await self._apply(await self._get_entity(user_id), changes)

    async def update_by_email(self, email: str, changes: Dict[str, Any]) -> Optional[User]:
        return await self._apply(await self._get_entity_by_email(email), changes)

    async def list_payment_requests(self) -> List[User]:
        stmt = (
            select(UserEntity)
            .where(UserEntity.payment_status != PaymentStatus.pending.value)
            .order_by(UserEntity.updated_at.desc(), UserEntity.id.desc())
        )
        result = await self.session.execute(stmt)
        return [User.model_validate(entity) for entity in result.scalars().all()]
