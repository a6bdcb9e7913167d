"""Service tracking the devices a user is signed in on."""

from typing import List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.sessions import SessionInfo
from ..database import UserSession, utcnow
from ..dependencies import register_service
from ..repository import UserSessionRepository
from ..security import session_token_for
from ..utils import parse_user_agent
from .errors import NotFoundError


@register_service
class SessionService:
    def __init__(self, db: AsyncSession):
        self.repo = UserSessionRepository(db)

    @classmethod
    def create(cls, db: AsyncSession) -> "SessionService":
        return cls(db)

    async def track_session(
        self, user_id: int, token: str, user_agent: str | None
    ) -> UserSession:
        """Record activity for the session of an access token."""
        session_token = session_token_for(token)
        session = await self.repo.get_by_token(user_id, session_token)

        if session is not None:
            return await self.repo.update(
                session, {"last_active_at": utcnow(), "is_active": True}
            )

        logger.info(f"New session for user {user_id}")
        return await self.repo.create(
            {
                "user_id": user_id,
                "session_token": session_token,
                "user_agent": user_agent,
                "device_info": parse_user_agent(user_agent),
                "last_active_at": utcnow(),
                "is_active": True,
            }
        )

    async def list_active_sessions(
        self, user_id: int, current_token: str
    ) -> List[SessionInfo]:
        current = session_token_for(current_token)
        sessions = await self.repo.get_active_by_user_id(user_id)
        return [
            SessionInfo(
                id=session.id,
                user_agent=session.user_agent,
                device_info=session.device_info or parse_user_agent(session.user_agent),
                last_active_at=session.last_active_at,
                created_at=session.created_at,
                is_current=session.session_token == current,
            )
            for session in sessions
        ]

    async def terminate_session(self, user_id: int, session_id: int) -> None:
        session = await self.repo.get_by_id(session_id)
        if session is None or session.user_id != user_id:
            raise NotFoundError("Session", session_id)
        await self.repo.update(session, {"is_active": False})
        logger.info(f"User {user_id} terminated session {session_id}")

    async def terminate_other_sessions(self, user_id: int, current_token: str) -> int:
        count = await self.repo.deactivate_all_except(
            user_id, session_token_for(current_token)
        )
        logger.info(f"User {user_id} terminated {count} other sessions")
        return count

    async def deactivate_session(self, user_id: int, token: str) -> bool:
        session = await self.repo.get_by_token(user_id, session_token_for(token))
        if session is None:
            return False
        await self.repo.update(session, {"is_active": False})
        return True
