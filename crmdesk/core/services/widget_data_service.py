"""Aggregates backing the dashboard widgets."""

from datetime import date
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...schemas.dashboard import (
    AccountsSummary,
    ContactsSummary,
    DashboardSummary,
    DealsSummary,
    EmailStats,
    LeadsSummary,
    TaskBrief,
    TasksSummary,
)
from ..dependencies import register_service
from ..repository import (
    AccountRepository,
    ContactRepository,
    DealRepository,
    EmailHistoryRepository,
    LeadRepository,
    TaskRepository,
)

CLOSED_DEAL_STAGES = ("Won", "Lost", "Dropped")
PENDING_TASK_STATUSES = ("open", "in_progress")
CONTACT_SOURCES = ("website", "referral", "linkedin")
ACCOUNT_STATUSES = ("new", "working", "hot", "nurture")


def _percent(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    # Half up, not banker's rounding
    return int(part * 100 / whole + 0.5)


@register_service
class WidgetDataService:
    """Per-user aggregates over CRM records."""

    def __init__(self, db: AsyncSession):
        self.leads = LeadRepository(db)
        self.contacts = ContactRepository(db)
        self.deals = DealRepository(db)
        self.accounts = AccountRepository(db)
        self.tasks = TaskRepository(db)
        self.emails = EmailHistoryRepository(db)

    @classmethod
    def create(cls, db: AsyncSession) -> "WidgetDataService":
        return cls(db)

    async def get_leads_summary(self, user_id: int) -> LeadsSummary:
        leads = await self.leads.get_by_owner(user_id)
        recent = max(
            (lead for lead in leads if lead.created_time),
            key=lambda lead: lead.created_time,
            default=None,
        )
        statuses = [lead.lead_status for lead in leads]
        return LeadsSummary(
            total=len(leads),
            new=statuses.count("New"),
            attempted=statuses.count("Attempted"),
            follow_up=statuses.count("Follow-up"),
            qualified=statuses.count("Qualified"),
            recent_lead=recent.lead_name if recent else None,
        )

    async def get_contacts_summary(self, user_id: int) -> ContactsSummary:
        contacts = await self.contacts.get_by_owner(user_id)
        by_source = {source: 0 for source in CONTACT_SOURCES}
        by_source["other"] = 0
        for contact in contacts:
            source = (contact.contact_source or "").lower()
            by_source[source if source in CONTACT_SOURCES else "other"] += 1
        return ContactsSummary(total=len(contacts), by_source=by_source)

    async def get_deals_summary(self, user_id: int) -> DealsSummary:
        deals = await self.deals.get_for_user(user_id)
        active = [deal for deal in deals if deal.stage not in CLOSED_DEAL_STAGES]
        won = [deal for deal in deals if deal.stage == "Won"]
        lost = [deal for deal in deals if deal.stage == "Lost"]
        return DealsSummary(
            total=len(deals),
            active=len(active),
            won=len(won),
            lost=len(lost),
            total_pipeline=sum(deal.total_contract_value or 0 for deal in active),
            won_value=sum(deal.total_contract_value or 0 for deal in won),
            by_stage={
                "rfq": sum(1 for deal in deals if deal.stage == "RFQ"),
                "offered": sum(1 for deal in deals if deal.stage == "Offered"),
                "won": len(won),
                "lost": len(lost),
            },
        )

    async def get_accounts_summary(self, user_id: int) -> AccountsSummary:
        accounts = await self.accounts.get_by_owner(user_id)
        statuses = [(account.status or "").lower() for account in accounts]
        return AccountsSummary(
            total=len(accounts),
            by_status={status: statuses.count(status) for status in ACCOUNT_STATUSES},
        )

    async def get_tasks_summary(
        self, user_id: int, today: Optional[date] = None
    ) -> TasksSummary:
        today = today or date.today()
        tasks = await self.tasks.get_for_user(user_id)
        pending = [task for task in tasks if task.status in PENDING_TASK_STATUSES]
        return TasksSummary(
            total=len(tasks),
            overdue=sum(1 for t in pending if t.due_date and t.due_date < today),
            due_today=sum(1 for t in tasks if t.due_date == today),
            high_priority=sum(1 for t in pending if t.priority == "high"),
            by_status={
                status: sum(1 for t in tasks if t.status == status)
                for status in ("open", "in_progress", "completed", "deferred")
            },
            tasks=[
                TaskBrief(
                    id=t.id,
                    title=t.title,
                    due_date=t.due_date.isoformat() if t.due_date else None,
                    priority=t.priority,
                    status=t.status,
                )
                for t in tasks[:5]
            ],
        )

    async def get_email_stats(self, user_id: int) -> EmailStats:
        emails = await self.emails.get_sent_by(user_id)
        sent = len(emails)
        opened = sum(1 for email in emails if (email.open_count or 0) > 0)
        clicked = sum(1 for email in emails if (email.click_count or 0) > 0)
        return EmailStats(
            sent=sent,
            opened=opened,
            clicked=clicked,
            open_rate=_percent(opened, sent),
            click_rate=_percent(clicked, sent),
            recent_subject=emails[0].subject if emails else None,
        )

    async def get_summary(self, user_id: int) -> DashboardSummary:
        return DashboardSummary(
            leads=await self.get_leads_summary(user_id),
            contacts=await self.get_contacts_summary(user_id),
            deals=await self.get_deals_summary(user_id),
            accounts=await self.get_accounts_summary(user_id),
            tasks=await self.get_tasks_summary(user_id),
            email_stats=await self.get_email_stats(user_id),
        )
