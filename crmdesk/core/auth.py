"""Authentication utilities."""

from typing import Optional

from fastapi import Depends, HTTPException, Request
from jose import jwt
from loguru import logger

from .database import User
from .dependencies import get_service
from .security import decode_jwt_token, verify_password
from .services.user_service import UserService


def _extract_token_from_request(request: Request) -> str:
    """Extract and clean the JWT token from request headers."""
    auth_header = request.headers.get("authorization", "")
    if not auth_header.lower().startswith("bearer "):
        return ""
    return auth_header[len("bearer ") :].strip()


def _log_auth_failure(message: str):
    logger.error(f"Authentication failed: {message}")


async def authenticate_user(
    username: str, password: str, user_service: UserService
) -> Optional[User]:
    """Check a username/password pair against the stored hash."""
    user = await user_service.get_user(username=username)

    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"Failed authentication attempt for user: {username}")
        return None

    if not user.is_active:
        logger.warning(f"Inactive user tried to sign in: {username}")
        return None

    logger.debug(f"User authenticated: {user.username}")
    return user


def get_current_token(request: Request) -> str:
    """The raw bearer token of the request."""
    token = _extract_token_from_request(request)
    if not token:
        _log_auth_failure("No token provided")
        raise HTTPException(status_code=401, detail="Authentication required")
    return token


async def get_current_user(
    token: str = Depends(get_current_token),
    user_service: UserService = Depends(get_service(UserService)),
) -> User:
    """Get current user using JWT token and repository"""
    try:
        payload = decode_jwt_token(token)
    except jwt.ExpiredSignatureError:
        _log_auth_failure("Token has expired")
        raise HTTPException(status_code=401, detail="Token has expired")
    except jwt.JWTError as e:
        _log_auth_failure(f"Invalid token: {str(e)}")
        raise HTTPException(status_code=401, detail="Invalid token")

    username = payload.get("sub")
    if not username:
        _log_auth_failure("Token missing 'sub' claim")
        raise HTTPException(status_code=401, detail="Invalid token format")

    user = await user_service.get_user(username=username)
    if not user or not user.is_active:
        _log_auth_failure(f"User not found or inactive: {username}")
        raise HTTPException(status_code=401, detail="User not found")

    logger.debug(f"Authenticated user: {user.username}")
    return user
