from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Public view of a user account."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str | None = Field(None, description="Email address")
    is_active: bool = Field(True, description="Active status")
    is_admin: bool = Field(False, description="Admin status")


class UserCreate(BaseModel):
    """User creation request model."""

    username: str
    password: str
    email: str
    is_admin: bool = False
