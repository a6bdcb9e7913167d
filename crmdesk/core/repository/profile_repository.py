from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Profile
from .base_repository import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    def __init__(self, db: AsyncSession):
        super().__init__(Profile, db)

    async def get_by_user_id(self, user_id: int) -> Profile | None:
        stmt = select(Profile).filter(Profile.user_id == user_id)
        return (await self.db.execute(stmt)).scalars().first()

    async def upsert(self, user_id: int, fields: Dict[str, Any]) -> Profile:
        profile = await self.get_by_user_id(user_id)

        if not profile:
            profile = Profile(user_id=user_id)
            self.db.add(profile)

        for key, value in fields.items():
            setattr(profile, key, value)

        await self.db.flush()
        await self.db.refresh(profile)
        return profile
