from .dashboard_service import DashboardService
from .email_template_service import EmailTemplateService
from .profile_service import ProfileService
from .record_service import RecordService
from .session_service import SessionService
from .user_preferences_service import UserPreferencesService
from .user_service import UserService
from .widget_data_service import WidgetDataService

__all__ = [
    "DashboardService",
    "EmailTemplateService",
    "ProfileService",
    "RecordService",
    "SessionService",
    "UserPreferencesService",
    "UserService",
    "WidgetDataService",
]
