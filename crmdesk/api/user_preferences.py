"""Routes for display and notification preferences."""

from fastapi import APIRouter, Depends

from ..core.auth import get_current_user
from ..core.database import User
from ..core.dependencies import get_service
from ..core.services import UserPreferencesService
from ..schemas.user_preferences import (
    DisplayPreferences,
    DisplayPreferencesUpdate,
    NotificationPreferences,
)

router = APIRouter()


@router.get("/display", response_model=DisplayPreferences)
async def get_display_preferences(
    current_user: User = Depends(get_current_user),
    preferences_service: UserPreferencesService = Depends(
        get_service(UserPreferencesService)
    ),
):
    return await preferences_service.get_preferences(current_user.id)


@router.put("/display", response_model=DisplayPreferences)
async def update_display_preferences(
    preferences: DisplayPreferencesUpdate,
    current_user: User = Depends(get_current_user),
    preferences_service: UserPreferencesService = Depends(
        get_service(UserPreferencesService)
    ),
):
    """Update only the provided fields."""
    return await preferences_service.update_preferences(
        current_user.id, preferences.model_dump(exclude_unset=True)
    )


@router.delete("/display", response_model=DisplayPreferences)
async def reset_display_preferences(
    current_user: User = Depends(get_current_user),
    preferences_service: UserPreferencesService = Depends(
        get_service(UserPreferencesService)
    ),
):
    return await preferences_service.reset_to_defaults(current_user.id)


@router.get("/notifications", response_model=NotificationPreferences)
async def get_notification_preferences(
    current_user: User = Depends(get_current_user),
    preferences_service: UserPreferencesService = Depends(
        get_service(UserPreferencesService)
    ),
):
    return await preferences_service.get_notification_preferences(current_user.id)


@router.put("/notifications", response_model=NotificationPreferences)
async def save_notification_preferences(
    preferences: NotificationPreferences,
    current_user: User = Depends(get_current_user),
    preferences_service: UserPreferencesService = Depends(
        get_service(UserPreferencesService)
    ),
):
    return await preferences_service.save_notification_preferences(
        current_user.id, preferences
    )
