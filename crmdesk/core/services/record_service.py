"""Service for the CRM records owned by a user."""

from typing import Dict, List

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import register_service
from ..repository import (
    AccountRepository,
    ContactRepository,
    DealRepository,
    LeadRepository,
)
from ..repository.crm_repository import OwnedRecordRepository
from .errors import NotFoundError


@register_service
class RecordService:
    def __init__(self, db: AsyncSession):
        self.repos: Dict[str, OwnedRecordRepository] = {
            "leads": LeadRepository(db),
            "contacts": ContactRepository(db),
            "deals": DealRepository(db),
            "accounts": AccountRepository(db),
        }

    @classmethod
    def create(cls, db: AsyncSession) -> "RecordService":
        return cls(db)

    def _repo(self, kind: str) -> OwnedRecordRepository:
        if kind not in self.repos:
            raise NotFoundError("Record type", kind)
        return self.repos[kind]

    async def list_records(self, kind: str, user_id: int) -> List:
        return await self._repo(kind).get_by_owner(user_id)

    async def create_record(self, kind: str, user_id: int, data: BaseModel):
        record = await self._repo(kind).create(
            {**data.model_dump(), "created_by": user_id}
        )
        logger.info(f"User {user_id} created {kind} record {record.id}")
        return record

    async def get_record(self, kind: str, user_id: int, record_id: int):
        record = await self._repo(kind).get_owned(user_id, record_id)
        if record is None:
            raise NotFoundError(kind.rstrip("s").capitalize(), record_id)
        return record

    async def delete_record(self, kind: str, user_id: int, record_id: int) -> None:
        record = await self.get_record(kind, user_id, record_id)
        await self._repo(kind).delete(record)
        logger.info(f"User {user_id} deleted {kind} record {record_id}")
