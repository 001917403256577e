"""Common FastAPI dependencies for API endpoints."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pulsa.api.auth import get_current_user, require_role
from pulsa.db import get_db, get_session_factory
from pulsa.models.user import User, UserRole
from pulsa.services.merchant_service import MerchantService
from pulsa.services.product_service import ProductService
from pulsa.services.transaction_service import TransactionService
from pulsa.services.user_service import UserService

# ============ Type Aliases for Common Dependencies ============

# Authenticated user
CurrentUser = Annotated[User, Depends(get_current_user)]

# Admin role required
AdminUser = Annotated[User, Depends(require_role(UserRole.ADMIN))]

DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============ Service Factories ============


def get_transaction_service(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> TransactionService:
    """Create TransactionService bound to the session factory."""
    return TransactionService(session_factory)


def get_merchant_service(db: DbSession) -> MerchantService:
    """Create MerchantService instance."""
    return MerchantService(db)


def get_product_service(db: DbSession) -> ProductService:
    """Create ProductService instance."""
    return ProductService(db)


def get_user_service(db: DbSession) -> UserService:
    """Create UserService instance."""
    return UserService(db)
