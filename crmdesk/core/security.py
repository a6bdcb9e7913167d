import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import jwt

from .config import get_server_settings

settings = get_server_settings()

SESSION_TOKEN_LENGTH = 20


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hashed version."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Not a bcrypt hash
        return False


def get_password_hash(password: str) -> str:
    """Generate a password hash."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def create_jwt_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: str | None = None,
    algorithm: str | None = None,
    **extra_claims,
) -> str:
    """
    Create a JWT token with specified claims.

    Args:
        subject: The subject of the token (the username)
        expires_delta: Optional timedelta for token expiration
        secret_key: Secret key for signing, defaults to the configured one
        algorithm: Signing algorithm, defaults to the configured one
        extra_claims: Additional claims to include in the token

    Returns:
        Encoded JWT token string
    """
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.token_expiration_minutes)

    payload = {
        "sub": subject,
        "iat": now,
        "exp": expire,
        "jti": uuid.uuid4().hex,
        **extra_claims,
    }

    return jwt.encode(
        payload,
        secret_key or settings.jwt_secret_key,
        algorithm=algorithm or settings.jwt_algorithm,
    )


def decode_jwt_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Raises:
        jose.JWTError: If the token is malformed, badly signed or expired
    """
    return jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )


def session_token_for(token: str) -> str:
    """Short key identifying the session an access token belongs to.

    Taken from the signature segment since every token shares its header.
    """
    return token.rsplit(".", 1)[-1][:SESSION_TOKEN_LENGTH]
