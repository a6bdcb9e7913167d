"""Routes for CRM records (leads, contacts, deals, accounts)."""

from typing import List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from ..core.auth import get_current_user
from ..core.database import User
from ..core.dependencies import get_service
from ..core.services import RecordService
from ..schemas.records import (
    Account,
    AccountCreate,
    Contact,
    ContactCreate,
    Deal,
    DealCreate,
    Lead,
    LeadCreate,
)

router = APIRouter()


def _add_record_routes(
    kind: str, create_schema: Type[BaseModel], response_schema: Type[BaseModel]
) -> None:
    """Register list/create/get/delete routes for one record kind."""

    @router.get(f"/{kind}", response_model=List[response_schema], name=f"list_{kind}")
    async def list_records(
        current_user: User = Depends(get_current_user),
        record_service: RecordService = Depends(get_service(RecordService)),
    ):
        return await record_service.list_records(kind, current_user.id)

    @router.post(
        f"/{kind}",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{kind}",
    )
    async def create_record(
        data: create_schema,
        current_user: User = Depends(get_current_user),
        record_service: RecordService = Depends(get_service(RecordService)),
    ):
        return await record_service.create_record(kind, current_user.id, data)

    @router.get(
        f"/{kind}/{{record_id}}", response_model=response_schema, name=f"get_{kind}"
    )
    async def get_record(
        record_id: int,
        current_user: User = Depends(get_current_user),
        record_service: RecordService = Depends(get_service(RecordService)),
    ):
        return await record_service.get_record(kind, current_user.id, record_id)

    @router.delete(
        f"/{kind}/{{record_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"delete_{kind}",
    )
    async def delete_record(
        record_id: int,
        current_user: User = Depends(get_current_user),
        record_service: RecordService = Depends(get_service(RecordService)),
    ):
        await record_service.delete_record(kind, current_user.id, record_id)


_add_record_routes("leads", LeadCreate, Lead)
_add_record_routes("contacts", ContactCreate, Contact)
_add_record_routes("deals", DealCreate, Deal)
_add_record_routes("accounts", AccountCreate, Account)
