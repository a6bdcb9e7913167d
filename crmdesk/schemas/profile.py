from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_TIMEZONE = "Asia/Kolkata"

ALLOWED_AVATAR_EXTENSIONS = ("png", "jpg", "jpeg", "webp", "gif")


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    timezone: Optional[str] = None


class Profile(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    timezone: str = DEFAULT_TIMEZONE
    avatar_url: Optional[str] = None
    display_name: str = Field("", description="Name shown in the header")
