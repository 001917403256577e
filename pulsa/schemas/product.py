"""Product schemas - Request/Response DTOs."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a product."""

    name_provider: str = Field(min_length=1, max_length=255)
    nominal: Decimal = Field(gt=0, description="Face value debited from merchant balance")
    price: Decimal = Field(gt=0, description="Sell price charged to the customer")


class ProductUpdate(BaseModel):
    """Schema for updating a product. Only provided fields change."""

    name_provider: str | None = Field(default=None, min_length=1, max_length=255)
    nominal: Decimal | None = Field(default=None, gt=0)
    price: Decimal | None = Field(default=None, gt=0)


class ProductResponse(BaseModel):
    """Schema for product response."""

    id: int
    name_provider: str
    nominal: Decimal
    price: Decimal
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
