from typing import List, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import EmailTemplate
from .base_repository import BaseRepository


class EmailTemplateRepository(BaseRepository[EmailTemplate]):
    def __init__(self, db: AsyncSession):
        super().__init__(EmailTemplate, db)

    async def search(
        self, query: str | None = None, skip: int = 0, limit: int | None = None
    ) -> Tuple[List[EmailTemplate], int]:
        """Templates newest first, optionally filtered on name or subject.

        Returns:
            The requested page and the total number of matches
        """
        stmt = select(EmailTemplate)
        if query:
            pattern = f"%{query.lower()}%"
            stmt = stmt.filter(
                or_(
                    func.lower(EmailTemplate.name).like(pattern),
                    func.lower(EmailTemplate.subject).like(pattern),
                )
            )

        total = (
            await self.db.execute(select(func.count()).select_from(stmt.subquery()))
        ).scalar_one()

        stmt = stmt.order_by(EmailTemplate.created_at.desc(), EmailTemplate.id.desc())
        stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return (await self.db.execute(stmt)).scalars().all(), total
