"""Repository for managing dashboard preferences."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import DashboardPreferences
from .base_repository import BaseRepository


class DashboardPreferencesRepository(BaseRepository[DashboardPreferences]):
    """Repository for managing dashboard preferences."""

    def __init__(self, db: AsyncSession):
        super().__init__(DashboardPreferences, db)

    async def get_by_user_id(self, user_id: int) -> DashboardPreferences | None:
        """Get the dashboard record of a user (there is at most one)."""
        result = await self.db.execute(
            select(DashboardPreferences).filter(
                DashboardPreferences.user_id == user_id
            )
        )
        return result.scalar_one_or_none()

    async def create_or_update(
        self, user_id: int, visible_widgets: list, card_order: list, layout: dict
    ) -> DashboardPreferences:
        """Create or replace the dashboard record of a user.

        Args:
            user_id: The user ID
            visible_widgets: Ordered visible widget keys
            card_order: Ordered display sequence
            layout: JSON-compatible layout mapping

        Returns:
            The created or updated record
        """
        prefs = await self.get_by_user_id(user_id)

        if prefs is None:
            prefs = DashboardPreferences(user_id=user_id)
            self.db.add(prefs)

        prefs.visible_widgets = visible_widgets
        prefs.card_order = card_order
        prefs.layout_view = layout

        await self.db.flush()
        await self.db.refresh(prefs)
        return prefs

    async def delete_by_user_id(self, user_id: int) -> DashboardPreferences | None:
        """Delete the dashboard record of a user.

        Returns:
            The deleted record if found, None otherwise
        """
        prefs = await self.get_by_user_id(user_id)
        if prefs:
            await self.db.delete(prefs)
            await self.db.flush()
        return prefs
