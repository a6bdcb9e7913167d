"""Routes for email templates."""

from fastapi import APIRouter, Depends, Query, status

from ..core.auth import get_current_user
from ..core.database import User
from ..core.dependencies import get_service
from ..core.services import EmailTemplateService
from ..schemas.email_templates import (
    EmailTemplate,
    EmailTemplateCreate,
    EmailTemplatePage,
)

router = APIRouter()


@router.get("", response_model=EmailTemplatePage)
async def list_email_templates(
    search: str | None = Query(None, description="Filter on name or subject"),
    page: int = Query(1, ge=1),
    _: User = Depends(get_current_user),
    template_service: EmailTemplateService = Depends(get_service(EmailTemplateService)),
):
    return await template_service.list_templates(search, page)


@router.post("", response_model=EmailTemplate, status_code=status.HTTP_201_CREATED)
async def create_email_template(
    data: EmailTemplateCreate,
    current_user: User = Depends(get_current_user),
    template_service: EmailTemplateService = Depends(get_service(EmailTemplateService)),
):
    return await template_service.create_template(current_user.id, data)


@router.put("/{template_id}", response_model=EmailTemplate)
async def update_email_template(
    template_id: int,
    data: EmailTemplateCreate,
    _: User = Depends(get_current_user),
    template_service: EmailTemplateService = Depends(get_service(EmailTemplateService)),
):
    return await template_service.update_template(template_id, data)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_email_template(
    template_id: int,
    _: User = Depends(get_current_user),
    template_service: EmailTemplateService = Depends(get_service(EmailTemplateService)),
):
    await template_service.delete_template(template_id)


@router.post(
    "/{template_id}/duplicate",
    response_model=EmailTemplate,
    status_code=status.HTTP_201_CREATED,
)
async def duplicate_email_template(
    template_id: int,
    current_user: User = Depends(get_current_user),
    template_service: EmailTemplateService = Depends(get_service(EmailTemplateService)),
):
    return await template_service.duplicate_template(current_user.id, template_id)
