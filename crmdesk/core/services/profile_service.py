from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.profile import DEFAULT_TIMEZONE, Profile, ProfileUpdate
from ..database import User
from ..dependencies import register_service
from ..repository import ProfileRepository


def display_name(full_name: str | None, email: str | None) -> str:
    """Full name, or the local part of the email when the name is unusable."""
    if full_name and "@" not in full_name:
        return full_name
    source = email or full_name or ""
    return source.split("@")[0]


@register_service
class ProfileService:
    def __init__(self, db: AsyncSession):
        self.repo = ProfileRepository(db)

    @classmethod
    def create(cls, db: AsyncSession) -> "ProfileService":
        return cls(db)

    async def get_profile(self, user: User) -> Profile:
        stored = await self.repo.get_by_user_id(user.id)
        if stored is None:
            return Profile(
                email=user.email,
                display_name=display_name(None, user.email),
            )

        email = stored.email or user.email
        return Profile(
            full_name=stored.full_name,
            email=email,
            phone=stored.phone,
            timezone=stored.timezone or DEFAULT_TIMEZONE,
            avatar_url=stored.avatar_url,
            display_name=display_name(stored.full_name, email),
        )

    async def update_profile(self, user: User, data: ProfileUpdate) -> Profile:
        await self.repo.upsert(user.id, data.model_dump(exclude_unset=True))
        logger.info(f"Updated profile of user {user.id}")
        return await self.get_profile(user)

    async def set_avatar_url(self, user: User, avatar_url: str | None) -> Profile:
        await self.repo.upsert(user.id, {"avatar_url": avatar_url})
        return await self.get_profile(user)
