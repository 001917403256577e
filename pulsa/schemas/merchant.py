"""Merchant schemas - Request/Response DTOs."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class MerchantCreate(BaseModel):
    """Schema for creating a merchant."""

    user_id: int
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(default="", max_length=512)
    balance: Decimal = Field(default=Decimal("0"), ge=0)


class MerchantUpdate(BaseModel):
    """Schema for updating a merchant. Only provided fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=512)
    balance: Decimal | None = Field(default=None, ge=0, description="New absolute balance")


class MerchantResponse(BaseModel):
    """Schema for merchant response."""

    id: int
    user_id: int
    name: str
    address: str
    balance: Decimal
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
