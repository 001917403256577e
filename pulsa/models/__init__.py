"""Models module - SQLModel database entities."""

from pulsa.models.merchant import Merchant
from pulsa.models.product import Product
from pulsa.models.transaction import Transaction, TransactionDetail
from pulsa.models.user import User, UserRole

__all__ = [
    # User
    "User",
    "UserRole",
    # Merchant
    "Merchant",
    # Product
    "Product",
    # Transaction
    "Transaction",
    "TransactionDetail",
]
