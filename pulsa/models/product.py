"""Pulsa Reseller Backend - Product model."""

from datetime import datetime
from decimal import Decimal

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class Product(SQLModel, table=True):
    """Pulsa product catalog entry.

    Attributes:
        id: Auto-increment primary key
        name_provider: Provider name (e.g. "Telkomsel")
        nominal: Face value; what the merchant balance pays per unit
        price: Sell price charged to the customer
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name_provider: str = Field(max_length=255, index=True)

    nominal: Decimal = Field(
        sa_column=sa.Column(sa.DECIMAL(20, 2), nullable=False),
    )
    price: Decimal = Field(
        sa_column=sa.Column(sa.DECIMAL(20, 2), nullable=False),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
