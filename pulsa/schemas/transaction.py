"""Transaction schemas for API request/response."""

from decimal import Decimal

from pydantic import BaseModel, Field

from pulsa.models.user import UserRole

# ============ Submit Schemas ============


class TransactionDetailCreate(BaseModel):
    """One requested product line.

    ``price`` is accepted for client compatibility but never trusted; the
    catalog sell price replaces it.
    """

    product_id: int
    price: Decimal = Decimal("0")


class TransactionCreate(BaseModel):
    """Schema for submitting a new order."""

    merchant_id: int
    customer_name: str = Field(min_length=1, max_length=255)
    destination_number: str = Field(min_length=1, max_length=32)
    transaction_date: str = Field(description="Sale date in dd-mm-yyyy format")
    transaction_detail: list[TransactionDetailCreate] = Field(min_length=1)


class TransactionDetailResponse(BaseModel):
    """Persisted order line."""

    id: int
    transaction_id: int
    product_id: int
    price: Decimal


class TransactionResponse(BaseModel):
    """Schema for a submitted order."""

    id: int
    merchant_id: int
    user_id: int
    customer_name: str
    destination_number: str
    transaction_date: str
    transaction_detail: list[TransactionDetailResponse]


# ============ History Schemas ============
# Defaults make the zero-valued aggregate returned for unknown order ids.


class UserSummary(BaseModel):
    """User embedded in a transaction aggregate."""

    id: int = 0
    username: str = ""
    role: UserRole | str = ""


class MerchantSummary(BaseModel):
    """Merchant embedded in a transaction aggregate."""

    id: int = 0
    name: str = ""
    address: str = ""


class ProductSummary(BaseModel):
    """Product embedded in a transaction line."""

    id: int = 0
    name_provider: str = ""
    nominal: Decimal = Decimal("0")
    price: Decimal = Decimal("0")


class TransactionDetailView(BaseModel):
    """Order line with its product."""

    id: int = 0
    transaction_id: int = 0
    price: Decimal = Decimal("0")
    product: ProductSummary = Field(default_factory=ProductSummary)


class TransactionAggregate(BaseModel):
    """Order reconstructed from the joined history rows."""

    id: int = 0
    customer_name: str = ""
    destination_number: str = ""
    transaction_date: str = ""
    user: UserSummary = Field(default_factory=UserSummary)
    merchant: MerchantSummary = Field(default_factory=MerchantSummary)
    transaction_detail: list[TransactionDetailView] = Field(default_factory=list)
