"""Pulsa Reseller Backend - Transaction (order) models."""

from datetime import date, datetime
from decimal import Decimal

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class Transaction(SQLModel, table=True):
    """Customer order header.

    Always created in the same database transaction as its details and the
    merchant balance debit.

    Attributes:
        id: Auto-increment primary key
        merchant_id: Merchant whose balance funds the order
        user_id: User who submitted the order
        customer_name: End customer name
        destination_number: Phone number receiving the credit
        transaction_date: Calendar date of the sale
    """

    __tablename__ = "transactions"

    id: int | None = Field(default=None, primary_key=True)
    merchant_id: int = Field(foreign_key="merchants.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    customer_name: str = Field(max_length=255)
    destination_number: str = Field(max_length=32)
    transaction_date: date = Field(sa_column=sa.Column(sa.Date, nullable=False, index=True))

    created_at: datetime = Field(default_factory=datetime.utcnow)


class TransactionDetail(SQLModel, table=True):
    """One product line of an order.

    ``price`` is the catalog sell price at insert time, never the price
    supplied by the caller.
    """

    __tablename__ = "transaction_details"

    id: int | None = Field(default=None, primary_key=True)
    transaction_id: int = Field(foreign_key="transactions.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    price: Decimal = Field(
        default=Decimal("0"),
        sa_column=sa.Column(sa.DECIMAL(20, 2), nullable=False, default=Decimal("0")),
    )
