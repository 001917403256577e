"""Schemas module - Pydantic DTOs for request/response."""

from pulsa.schemas.merchant import MerchantCreate, MerchantResponse, MerchantUpdate
from pulsa.schemas.pagination import CustomPage
from pulsa.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from pulsa.schemas.transaction import (
    MerchantSummary,
    ProductSummary,
    TransactionAggregate,
    TransactionCreate,
    TransactionDetailCreate,
    TransactionDetailResponse,
    TransactionDetailView,
    TransactionResponse,
    UserSummary,
)
from pulsa.schemas.user import UserResponse, UserUpdate

__all__: list[str] = [
    # Pagination
    "CustomPage",
    # Merchant
    "MerchantCreate",
    "MerchantUpdate",
    "MerchantResponse",
    # Product
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    # User
    "UserResponse",
    "UserUpdate",
    # Transaction
    "TransactionCreate",
    "TransactionDetailCreate",
    "TransactionResponse",
    "TransactionDetailResponse",
    "TransactionAggregate",
    "TransactionDetailView",
    "UserSummary",
    "MerchantSummary",
    "ProductSummary",
]
