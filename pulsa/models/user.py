"""Pulsa Reseller Backend - User model."""

from datetime import datetime
from enum import Enum

from sqlmodel import Field, SQLModel


class UserRole(str, Enum):
    """User roles for access control."""

    ADMIN = "admin"
    MERCHANT = "merchant"


class User(SQLModel, table=True):
    """User model - synced from Clerk.

    Attributes:
        id: Auto-increment primary key
        clerk_id: Unique Clerk user ID (indexed)
        username: Display username
        email: User email address
        role: User role for RBAC
        is_active: Account status
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    clerk_id: str = Field(max_length=255, unique=True, index=True)
    username: str = Field(max_length=255)
    email: str | None = Field(default=None, max_length=255)
    role: UserRole = Field(default=UserRole.MERCHANT)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
