"""Pulsa Reseller Backend - Merchant model.

A merchant holds the balance that funds pulsa purchases made on behalf
of customers.
"""

from datetime import datetime
from decimal import Decimal

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class Merchant(SQLModel, table=True):
    """Merchant model.

    Attributes:
        id: Auto-increment primary key
        user_id: Owning user ID
        name: Merchant display name
        address: Merchant address
        balance: Spendable balance, debited by the nominal value of each sale
    """

    __tablename__ = "merchants"
    __table_args__ = (sa.CheckConstraint("balance >= 0", name="ck_merchants_balance_non_negative"),)

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    name: str = Field(max_length=255)
    address: str = Field(default="", max_length=512)

    balance: Decimal = Field(
        default=Decimal("0"),
        sa_column=sa.Column(sa.DECIMAL(20, 2), nullable=False, default=Decimal("0")),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
