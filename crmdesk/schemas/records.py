"""Schemas for CRM records."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LeadCreate(BaseModel):
    lead_name: str = Field(..., min_length=1)
    company_name: Optional[str] = None
    email: Optional[str] = None
    lead_status: str = "New"


class Lead(LeadCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: int
    created_time: Optional[datetime] = None


class ContactCreate(BaseModel):
    contact_name: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone_no: Optional[str] = None
    segment: Optional[str] = None
    contact_source: Optional[str] = None


class Contact(ContactCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: int
    created_time: Optional[datetime] = None


class DealCreate(BaseModel):
    deal_name: str = Field(..., min_length=1)
    stage: str = "Lead"
    total_contract_value: Optional[float] = Field(None, ge=0)
    expected_closing_date: Optional[date] = None
    lead_owner: Optional[int] = None


class Deal(DealCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: int
    created_at: Optional[datetime] = None


class AccountCreate(BaseModel):
    company_name: str = Field(..., min_length=1)
    segment: Optional[str] = None
    status: str = "New"
    total_revenue: Optional[float] = Field(None, ge=0)


class Account(AccountCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: int
    created_at: Optional[datetime] = None
