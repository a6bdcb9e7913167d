"""Service for reusable email templates."""

import math

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.email_templates import (
    TEMPLATES_PER_PAGE,
    EmailTemplate,
    EmailTemplateCreate,
    EmailTemplatePage,
)
from ..database import EmailTemplate as EmailTemplateModel
from ..dependencies import register_service
from ..repository import EmailTemplateRepository
from .errors import NotFoundError, ValidationError


def _validate(data: EmailTemplateCreate) -> None:
    missing = [
        field
        for field in ("name", "subject", "body")
        if not getattr(data, field).strip()
    ]
    if missing:
        raise ValidationError(f"Template {', '.join(missing)} cannot be empty")


@register_service
class EmailTemplateService:
    def __init__(self, db: AsyncSession):
        self.repo = EmailTemplateRepository(db)

    @classmethod
    def create(cls, db: AsyncSession) -> "EmailTemplateService":
        return cls(db)

    async def list_templates(
        self, search: str | None = None, page: int = 1
    ) -> EmailTemplatePage:
        """One page of templates, newest first.

        Args:
            search: Case-insensitive filter on name and subject
            page: 1-based page number; past the end yields no templates
        """
        if page < 1:
            raise ValidationError("Page must be 1 or greater")

        search = search.strip() if search else None
        templates, total = await self.repo.search(
            search, skip=(page - 1) * TEMPLATES_PER_PAGE, limit=TEMPLATES_PER_PAGE
        )
        return EmailTemplatePage(
            templates=[EmailTemplate.model_validate(t) for t in templates],
            total=total,
            page=page,
            total_pages=math.ceil(total / TEMPLATES_PER_PAGE),
        )

    async def get_template(self, template_id: int) -> EmailTemplateModel:
        template = await self.repo.get_by_id(template_id)
        if template is None:
            raise NotFoundError("Email template", template_id)
        return template

    async def create_template(
        self, user_id: int, data: EmailTemplateCreate
    ) -> EmailTemplateModel:
        _validate(data)
        template = await self.repo.create({**data.model_dump(), "created_by": user_id})
        logger.info(f"User {user_id} created email template {template.id}")
        return template

    async def update_template(
        self, template_id: int, data: EmailTemplateCreate
    ) -> EmailTemplateModel:
        _validate(data)
        template = await self.get_template(template_id)
        return await self.repo.update(template, data)

    async def delete_template(self, template_id: int) -> None:
        template = await self.get_template(template_id)
        await self.repo.delete(template)
        logger.info(f"Deleted email template {template_id}")

    async def duplicate_template(
        self, user_id: int, template_id: int
    ) -> EmailTemplateModel:
        source = await self.get_template(template_id)
        return await self.create_template(
            user_id,
            EmailTemplateCreate(
                name=f"{source.name} (Copy)", subject=source.subject, body=source.body
            ),
        )
