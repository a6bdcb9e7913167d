"""Database configuration and models."""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base, relationship

from .config import get_server_settings

settings = get_server_settings()

engine = create_async_engine(settings.database_url, echo=settings.debug)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Create base class for models
Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True)
    password_hash = Column(String)
    email = Column(String, unique=True, index=True)
    is_active = Column(Boolean, default=True)
    is_admin = Column(Boolean, default=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    profile = relationship(
        "Profile", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    preferences = relationship(
        "UserPreferences",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )


class Profile(Base):
    """Public profile shown across the CRM."""

    __tablename__ = "profiles"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True, index=True)
    full_name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    timezone = Column(String, default="Asia/Kolkata")
    avatar_url = Column(String, nullable=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="profile")


class UserPreferences(Base):
    """Display preferences model."""

    __tablename__ = "user_preferences"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True, index=True)
    theme = Column(String, default="system")
    date_format = Column(String, default="DD/MM/YYYY")
    time_format = Column(String, default="12h")
    currency = Column(String, default="INR")
    default_module = Column(String, default="dashboard")
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="preferences")


class NotificationPreferences(Base):
    """Which notifications a user wants and how they are delivered."""

    __tablename__ = "notification_preferences"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True, index=True)
    email_notifications = Column(Boolean, default=True)
    in_app_notifications = Column(Boolean, default=True)
    push_notifications = Column(Boolean, default=False)
    lead_assigned = Column(Boolean, default=True)
    deal_updates = Column(Boolean, default=True)
    task_reminders = Column(Boolean, default=True)
    meeting_reminders = Column(Boolean, default=True)
    weekly_digest = Column(Boolean, default=False)
    notification_frequency = Column(String, default="instant")
    leads_notifications = Column(Boolean, default=True)
    contacts_notifications = Column(Boolean, default=True)
    accounts_notifications = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class DashboardPreferences(Base):
    """Per-user dashboard: visible widgets, card order and grid layout."""

    __tablename__ = "dashboard_preferences"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True, index=True)
    visible_widgets = Column(JSON, nullable=True)
    card_order = Column(JSON, nullable=True)
    # Older rows hold a JSON-encoded string here instead of an object
    layout_view = Column(JSON, nullable=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class UserSession(Base):
    """A signed-in browser or device."""

    __tablename__ = "user_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    session_token = Column(String, index=True)  # First 20 chars of the access token
    user_agent = Column(String, nullable=True)
    device_info = Column(JSON, nullable=True)
    last_active_at = Column(DateTime, default=utcnow)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=utcnow)


class EmailTemplate(Base):
    """Reusable email template."""

    __tablename__ = "email_templates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    subject = Column(String)
    body = Column(Text)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Lead(Base):
    """Lead model."""

    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, index=True)
    lead_name = Column(String)
    company_name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    lead_status = Column(String, default="New")
    created_by = Column(Integer, ForeignKey("users.id"), index=True)
    created_time = Column(DateTime, default=utcnow)


class Contact(Base):
    """Contact model."""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True)
    contact_name = Column(String)
    email = Column(String, nullable=True)
    phone_no = Column(String, nullable=True)
    segment = Column(String, nullable=True)
    contact_source = Column(String, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), index=True)
    created_time = Column(DateTime, default=utcnow)


class Deal(Base):
    """Deal model."""

    __tablename__ = "deals"

    id = Column(Integer, primary_key=True, index=True)
    deal_name = Column(String)
    stage = Column(String, default="Lead")
    total_contract_value = Column(Float, nullable=True)
    expected_closing_date = Column(Date, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), index=True)
    lead_owner = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=utcnow)


class Account(Base):
    """Account (company) model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String)
    segment = Column(String, nullable=True)
    status = Column(String, default="New")
    total_revenue = Column(Float, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), index=True)
    created_at = Column(DateTime, default=utcnow)


class Task(Base):
    """Task model."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String)
    due_date = Column(Date, nullable=True)
    priority = Column(String, default="medium")
    status = Column(String, default="open")
    assigned_to = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), index=True)
    completed_at = Column(DateTime, nullable=True)


class EmailHistory(Base):
    """Sent email with tracking counters."""

    __tablename__ = "email_history"

    id = Column(Integer, primary_key=True, index=True)
    subject = Column(String)
    status = Column(String, default="sent")
    open_count = Column(Integer, default=0)
    click_count = Column(Integer, default=0)
    sent_by = Column(Integer, ForeignKey("users.id"), index=True)
    sent_at = Column(DateTime, default=utcnow)
