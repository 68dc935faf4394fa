"""
Game settings repository implementation on async SQLAlchemy sessions.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from promogame.core.models.domain import GameSettings, GameSettingsValues
from promogame.core.store.interfaces import GameSettingsRepository

from ..base import utc_now
from ..entities.game_settings import GameSettingsEntity


class SqlGameSettingsRepository(GameSettingsRepository):
    """Repository for the singleton game settings row."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self) -> Optional[GameSettingsEntity]:
        stmt = select(GameSettingsEntity).order_by(GameSettingsEntity.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_current(self) -> Optional[GameSettings]:
        entity = await self._first()
        return GameSettings.model_validate(entity) if entity else None

    async def save(self, values: GameSettingsValues) -> GameSettings:
        entity = await self._first()
        now = utc_now()
        if entity is None:
            entity = GameSettingsEntity(**values.model_dump(), created_at=now, updated_at=now)
        else:
            for key, value in values.model_dump().items():
                setattr(entity, key, value)
            entity.updated_at = now
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return GameSettings.model_validate(entity)
