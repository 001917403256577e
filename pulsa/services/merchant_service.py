"""Merchant Service - Business logic for merchant management."""

import logging
from datetime import datetime

from fastapi_pagination.ext.sqlmodel import apaginate
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from pulsa.core.exceptions import StorageError
from pulsa.models.merchant import Merchant
from pulsa.models.user import User
from pulsa.schemas.merchant import MerchantCreate, MerchantResponse, MerchantUpdate
from pulsa.schemas.pagination import CustomPage

logger = logging.getLogger(__name__)


class MerchantService:
    """Service for merchant-related business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_merchants(self, search: str | None = None) -> CustomPage[MerchantResponse]:
        """List merchants with optional name search and pagination.

        Args:
            search: Search by merchant name

        Returns:
            Paginated merchant list
        """
        query = select(Merchant)
        if search:
            # Escape special LIKE characters to prevent pattern injection
            escaped = search.replace("%", r"\%").replace("_", r"\_")
            query = query.where(Merchant.name.ilike(f"%{escaped}%"))  # type: ignore[attr-defined]
        query = query.order_by(Merchant.id)

        return await apaginate(
            self.db,
            query,
            transformer=lambda items: [MerchantResponse.model_validate(m) for m in items],
        )

    async def get_merchant(self, merchant_id: int) -> Merchant | None:
        """Get merchant by ID.

        Args:
            merchant_id: Merchant ID

        Returns:
            Merchant or None
        """
        return await self.db.get(Merchant, merchant_id)

    async def create_merchant(self, data: MerchantCreate) -> Merchant:
        """Create a merchant owned by an existing user.

        Raises:
            ValueError: If the owning user does not exist
        """
        owner = await self.db.get(User, data.user_id)
        if not owner:
            raise ValueError(f"User with ID {data.user_id} not found")

        merchant = Merchant(**data.model_dump())
        self.db.add(merchant)
        await self.db.commit()
        await self.db.refresh(merchant)
        logger.info("Created merchant %s for user %s", merchant.id, data.user_id)
        return merchant

    async def update_merchant(self, merchant_id: int, data: MerchantUpdate) -> Merchant | None:
        """Update merchant fields that were provided.

        Returns:
            Updated merchant or None if not found
        """
        merchant = await self.db.get(Merchant, merchant_id)
        if not merchant:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(merchant, field, value)
        merchant.updated_at = datetime.utcnow()

        self.db.add(merchant)
        await self.db.commit()
        await self.db.refresh(merchant)
        logger.info("Updated merchant %s", merchant_id)
        return merchant

    async def delete_merchant(self, merchant_id: int) -> bool:
        """Delete a merchant.

        Returns:
            True if deleted, False if not found

        Raises:
            StorageError: If transactions still reference the merchant
        """
        merchant = await self.db.get(Merchant, merchant_id)
        if not merchant:
            return False

        await self.db.delete(merchant)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise StorageError.in_use("Merchant", merchant_id) from e
        logger.info("Deleted merchant %s", merchant_id)
        return True
