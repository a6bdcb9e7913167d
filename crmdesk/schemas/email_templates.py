from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

TEMPLATES_PER_PAGE = 10


class EmailTemplateBase(BaseModel):
    name: str
    subject: str
    body: str


class EmailTemplateCreate(EmailTemplateBase):
    """Request to create or replace a template."""


class EmailTemplate(EmailTemplateBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EmailTemplatePage(BaseModel):
    """One page of templates plus the numbers needed to paginate."""

    templates: List[EmailTemplate]
    total: int
    page: int
    page_size: int = TEMPLATES_PER_PAGE
    total_pages: int
