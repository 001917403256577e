"""User schemas - Request/Response DTOs."""

from datetime import datetime

from pydantic import BaseModel, Field

from pulsa.models.user import UserRole


class UserResponse(BaseModel):
    """Schema for user response."""

    id: int
    username: str
    email: str | None = None
    role: UserRole
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserUpdate(BaseModel):
    """Schema for admin user updates."""

    username: str | None = Field(default=None, min_length=1, max_length=255)
    role: UserRole | None = None
    is_active: bool | None = None
