from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).filter(User.email == email)
        return (await self.db.execute(stmt)).scalars().first()

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).filter(User.username == username)
        return (await self.db.execute(stmt)).scalars().first()
