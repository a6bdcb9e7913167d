"""Routes for the current user's profile and avatar."""

from fastapi import APIRouter, Depends, File, UploadFile

from ..core.auth import get_current_user
from ..core.database import User
from ..core.dependencies import get_service
from ..core.services import ProfileService
from ..core.storage import AvatarStorage, get_avatar_storage
from ..schemas.profile import Profile, ProfileUpdate

router = APIRouter()


@router.get("", response_model=Profile)
async def get_profile(
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_service(ProfileService)),
):
    return await profile_service.get_profile(current_user)


@router.put("", response_model=Profile)
async def update_profile(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_service(ProfileService)),
):
    return await profile_service.update_profile(current_user, data)


@router.post("/avatar", response_model=Profile)
async def upload_avatar(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_service(ProfileService)),
    storage: AvatarStorage = Depends(get_avatar_storage),
):
    """Replace the avatar; the stored URL carries a cache-busting timestamp."""
    data = await file.read()
    avatar_url = storage.upload(
        current_user.id, file.filename, data, file.content_type
    )
    return await profile_service.set_avatar_url(current_user, avatar_url)


@router.delete("/avatar", response_model=Profile)
async def remove_avatar(
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_service(ProfileService)),
    storage: AvatarStorage = Depends(get_avatar_storage),
):
    storage.remove(current_user.id)
    return await profile_service.set_avatar_url(current_user, None)
