from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.user import UserCreate
from ..database import User
from ..dependencies import register_service
from ..repository import UserRepository
from ..security import get_password_hash
from .errors import ConflictError


@register_service
class UserService:
    def __init__(self, db: AsyncSession):
        self.repo = UserRepository(db)

    @classmethod
    def create(cls, db: AsyncSession) -> "UserService":
        return cls(db)

    async def register_user(self, data: UserCreate) -> User:
        if await self.repo.get_by_username(data.username):
            raise ConflictError(f"Username already taken: {data.username}")
        if await self.repo.get_by_email(data.email):
            raise ConflictError(f"Email already registered: {data.email}")

        return await self.repo.create(
            {
                "username": data.username,
                "email": data.email,
                "password_hash": get_password_hash(data.password),
                "is_admin": data.is_admin,
            }
        )

    async def get_user(
        self,
        user_id: int | None = None,
        username: str | None = None,
        email: str | None = None,
    ) -> User | None:
        if user_id:
            return await self.repo.get_by_id(user_id)
        if username:
            return await self.repo.get_by_username(username)
        if email:
            return await self.repo.get_by_email(email)
        raise ValueError("No valid identifier provided")
