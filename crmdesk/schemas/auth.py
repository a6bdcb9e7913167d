from pydantic import BaseModel

from .user import User


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User


class LogoutResponse(BaseModel):
    status: str = "success"
    message: str = "Logged out"
