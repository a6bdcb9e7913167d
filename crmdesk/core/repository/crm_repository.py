"""Repositories for CRM records owned by a user."""

from typing import List

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Account, Contact, Deal, EmailHistory, Lead, Task
from .base_repository import BaseRepository


class OwnedRecordRepository(BaseRepository):
    """Records with a `created_by` owner column."""

    async def get_by_owner(self, user_id: int) -> List:
        stmt = (
            select(self.model)
            .filter(self.model.created_by == user_id)
            .order_by(self.model.id.desc())
        )
        return (await self.db.execute(stmt)).scalars().all()

    async def get_owned(self, user_id: int, record_id: int):
        stmt = select(self.model).filter(
            self.model.id == record_id, self.model.created_by == user_id
        )
        return (await self.db.execute(stmt)).scalars().first()


class LeadRepository(OwnedRecordRepository):
    def __init__(self, db: AsyncSession):
        super().__init__(Lead, db)


class ContactRepository(OwnedRecordRepository):
    def __init__(self, db: AsyncSession):
        super().__init__(Contact, db)


class AccountRepository(OwnedRecordRepository):
    def __init__(self, db: AsyncSession):
        super().__init__(Account, db)


class DealRepository(OwnedRecordRepository):
    def __init__(self, db: AsyncSession):
        super().__init__(Deal, db)

    async def get_for_user(self, user_id: int) -> List[Deal]:
        """Deals the user created or owns."""
        stmt = select(Deal).filter(
            or_(Deal.created_by == user_id, Deal.lead_owner == user_id)
        )
        return (await self.db.execute(stmt)).scalars().all()


class TaskRepository(OwnedRecordRepository):
    def __init__(self, db: AsyncSession):
        super().__init__(Task, db)

    async def get_for_user(self, user_id: int) -> List[Task]:
        """Tasks assigned to or created by the user."""
        stmt = (
            select(Task)
            .filter(or_(Task.assigned_to == user_id, Task.created_by == user_id))
            .order_by(Task.id)
        )
        return (await self.db.execute(stmt)).scalars().all()


class EmailHistoryRepository(BaseRepository[EmailHistory]):
    def __init__(self, db: AsyncSession):
        super().__init__(EmailHistory, db)

    async def get_sent_by(self, user_id: int) -> List[EmailHistory]:
        stmt = (
            select(EmailHistory)
            .filter(EmailHistory.sent_by == user_id)
            .order_by(EmailHistory.sent_at.desc(), EmailHistory.id.desc())
        )
        return (await self.db.execute(stmt)).scalars().all()
