from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.user_preferences import (
    DisplayPreferences,
    NotificationPreferences,
)
from ..dependencies import register_service
from ..repository import (
    NotificationPreferencesRepository,
    UserPreferencesRepository,
)


@register_service
class UserPreferencesService:
    def __init__(self, db: AsyncSession):
        self.repo = UserPreferencesRepository(db)
        self.notifications_repo = NotificationPreferencesRepository(db)

    @classmethod
    def create(cls, db: AsyncSession) -> "UserPreferencesService":
        return cls(db)

    async def get_preferences(self, user_id: int) -> DisplayPreferences:
        stored = await self.repo.get_by_user_id(user_id)
        if stored is None:
            return DisplayPreferences()
        return DisplayPreferences.model_validate(stored)

    async def update_preferences(
        self, user_id: int, preferences: dict
    ) -> DisplayPreferences:
        await self.repo.update_preferences(user_id, preferences)
        return await self.get_preferences(user_id)

    async def reset_to_defaults(self, user_id: int) -> DisplayPreferences:
        defaults = DisplayPreferences()
        await self.repo.update_preferences(user_id, defaults.model_dump())
        return defaults

    async def get_notification_preferences(
        self, user_id: int
    ) -> NotificationPreferences:
        stored = await self.notifications_repo.get_by_user_id(user_id)
        if stored is None:
            return NotificationPreferences()
        return NotificationPreferences.model_validate(stored)

    async def save_notification_preferences(
        self, user_id: int, preferences: NotificationPreferences
    ) -> NotificationPreferences:
        await self.notifications_repo.upsert(user_id, preferences.model_dump())
        return await self.get_notification_preferences(user_id)
