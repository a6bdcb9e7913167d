from .base_repository import BaseRepository
from .crm_repository import (
    AccountRepository,
    ContactRepository,
    DealRepository,
    EmailHistoryRepository,
    LeadRepository,
    TaskRepository,
)
from .dashboard_preferences_repository import DashboardPreferencesRepository
from .email_template_repository import EmailTemplateRepository
from .profile_repository import ProfileRepository
from .session_repository import UserSessionRepository
from .user_preferences_repository import (
    NotificationPreferencesRepository,
    UserPreferencesRepository,
)
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "AccountRepository",
    "ContactRepository",
    "DealRepository",
    "EmailHistoryRepository",
    "LeadRepository",
    "TaskRepository",
    "DashboardPreferencesRepository",
    "EmailTemplateRepository",
    "ProfileRepository",
    "UserSessionRepository",
    "NotificationPreferencesRepository",
    "UserPreferencesRepository",
]
