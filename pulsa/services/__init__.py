"""Services module - business logic layer."""

from pulsa.services.merchant_service import MerchantService
from pulsa.services.product_service import ProductService
from pulsa.services.transaction_builder import TransactionAggregateBuilder
from pulsa.services.transaction_service import TransactionService
from pulsa.services.user_service import UserService

__all__ = [
    "MerchantService",
    "ProductService",
    "TransactionAggregateBuilder",
    "TransactionService",
    "UserService",
]
