"""Authentication routes."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from loguru import logger

from ..core.auth import authenticate_user, get_current_token, get_current_user
from ..core.database import User
from ..core.dependencies import get_service
from ..core.security import create_jwt_token
from ..core.services import SessionService, UserService
from ..schemas.auth import LogoutResponse, TokenResponse
from ..schemas.user import User as UserSchema

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
async def login_for_access_token(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    user_service: UserService = Depends(get_service(UserService)),
    session_service: SessionService = Depends(get_service(SessionService)),
):
    """Login endpoint to issue access tokens."""
    user = await authenticate_user(form_data.username, form_data.password, user_service)
    if not user:
        raise HTTPException(status_code=401, detail="Incorrect username or password")

    token = create_jwt_token(user.username)
    await session_service.track_session(
        user.id, token, request.headers.get("user-agent")
    )
    logger.info(f"Issued access token for user {user.username}")

    return TokenResponse(access_token=token, user=UserSchema.model_validate(user))


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    token: str = Depends(get_current_token),
    current_user: User = Depends(get_current_user),
    session_service: SessionService = Depends(get_service(SessionService)),
):
    await session_service.deactivate_session(current_user.id, token)
    logger.info(f"User {current_user.username} logged out")
    return LogoutResponse()
