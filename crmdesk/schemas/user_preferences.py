from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class DisplayPreferences(BaseModel):
    """Display preferences with their defaults."""

    model_config = ConfigDict(from_attributes=True)

    theme: Literal["light", "dark", "system"] = Field(
        "system", description="User's preferred theme"
    )
    date_format: str = Field("DD/MM/YYYY", description="Date display format")
    time_format: Literal["12h", "24h"] = Field("12h", description="Clock format")
    currency: str = Field("INR", description="Currency code for amounts")
    default_module: str = Field("dashboard", description="Landing page")


class DisplayPreferencesUpdate(BaseModel):
    """Partial update; accepts camelCase keys as sent by the browser."""

    model_config = ConfigDict(populate_by_name=True)

    theme: Optional[Literal["light", "dark", "system"]] = None
    date_format: Optional[str] = Field(None, alias="dateFormat")
    time_format: Optional[Literal["12h", "24h"]] = Field(None, alias="timeFormat")
    currency: Optional[str] = None
    default_module: Optional[str] = Field(None, alias="defaultModule")


class NotificationPreferences(BaseModel):
    """Notification toggles with their defaults."""

    model_config = ConfigDict(from_attributes=True)

    email_notifications: bool = True
    in_app_notifications: bool = True
    push_notifications: bool = False
    lead_assigned: bool = True
    deal_updates: bool = True
    task_reminders: bool = True
    meeting_reminders: bool = True
    weekly_digest: bool = False
    notification_frequency: Literal["instant", "hourly", "daily", "weekly"] = "instant"
    leads_notifications: bool = True
    contacts_notifications: bool = True
    accounts_notifications: bool = True
