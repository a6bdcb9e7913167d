"""Repository for tracked user sessions."""

from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import UserSession
from .base_repository import BaseRepository


class UserSessionRepository(BaseRepository[UserSession]):
    def __init__(self, db: AsyncSession):
        super().__init__(UserSession, db)

    async def get_by_token(
        self, user_id: int, session_token: str
    ) -> UserSession | None:
        stmt = select(UserSession).filter(
            UserSession.user_id == user_id,
            UserSession.session_token == session_token,
        )
        return (await self.db.execute(stmt)).scalars().first()

    async def get_active_by_user_id(self, user_id: int) -> List[UserSession]:
        stmt = (
            select(UserSession)
            .filter(UserSession.user_id == user_id, UserSession.is_active.is_(True))
            .order_by(UserSession.last_active_at.desc(), UserSession.id.desc())
        )
        return (await self.db.execute(stmt)).scalars().all()

    async def deactivate_all_except(self, user_id: int, session_token: str) -> int:
        """Mark every active session of the user inactive except one.

        Returns:
            Number of sessions deactivated
        """
        stmt = (
            update(UserSession)
            .where(
                UserSession.user_id == user_id,
                UserSession.session_token != session_token,
                UserSession.is_active.is_(True),
            )
            .values(is_active=False)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.db.execute(stmt)
        await self.db.flush()
        return result.rowcount
