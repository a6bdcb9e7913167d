from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import NotificationPreferences, UserPreferences
from ..utils import camel_to_snake
from .base_repository import BaseRepository


class UserPreferencesRepository(BaseRepository[UserPreferences]):
    def __init__(self, db: AsyncSession):
        super().__init__(UserPreferences, db)

    async def get_by_user_id(self, user_id: int) -> UserPreferences | None:
        stmt = select(UserPreferences).filter(UserPreferences.user_id == user_id)
        return (await self.db.execute(stmt)).scalars().first()

    async def update_preferences(
        self, user_id: int, preferences: Dict[str, Any]
    ) -> UserPreferences:
        existing_prefs = await self.get_by_user_id(user_id)

        if not existing_prefs:
            existing_prefs = UserPreferences(user_id=user_id)
            self.db.add(existing_prefs)

        for key, value in preferences.items():
            setattr(existing_prefs, camel_to_snake(key), value)

        await self.db.flush()
        await self.db.refresh(existing_prefs)

        return existing_prefs


class NotificationPreferencesRepository(BaseRepository[NotificationPreferences]):
    def __init__(self, db: AsyncSession):
        super().__init__(NotificationPreferences, db)

    async def get_by_user_id(self, user_id: int) -> NotificationPreferences | None:
        stmt = select(NotificationPreferences).filter(
            NotificationPreferences.user_id == user_id
        )
        return (await self.db.execute(stmt)).scalars().first()

    async def upsert(
        self, user_id: int, preferences: Dict[str, Any]
    ) -> NotificationPreferences:
        existing_prefs = await self.get_by_user_id(user_id)

        if not existing_prefs:
            existing_prefs = NotificationPreferences(user_id=user_id)
            self.db.add(existing_prefs)

        for key, value in preferences.items():
            setattr(existing_prefs, key, value)

        await self.db.flush()
        await self.db.refresh(existing_prefs)
        return existing_prefs
