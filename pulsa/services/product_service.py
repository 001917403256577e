"""Product Service - Pulsa product catalog."""

from datetime import datetime

from fastapi_pagination.ext.sqlmodel import apaginate
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from pulsa.core.exceptions import StorageError
from pulsa.models.product import Product
from pulsa.schemas.pagination import CustomPage
from pulsa.schemas.product import ProductCreate, ProductResponse, ProductUpdate


class ProductService:
    """Service for product catalog management."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_products(self, provider: str | None = None) -> CustomPage[ProductResponse]:
        """List products, optionally filtered by provider name."""
        query = select(Product)
        if provider:
            query = query.where(Product.name_provider == provider)
        query = query.order_by(Product.name_provider, Product.nominal)  # type: ignore[arg-type]

        return await apaginate(
            self.db,
            query,
            transformer=lambda items: [ProductResponse.model_validate(p) for p in items],
        )

    async def get_product(self, product_id: int) -> Product | None:
        return await self.db.get(Product, product_id)

    async def create_product(self, data: ProductCreate) -> Product:
        product = Product(**data.model_dump())
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def update_product(self, product_id: int, data: ProductUpdate) -> Product | None:
        """Update provided product fields.

        Price changes do not touch existing transaction details; those keep
        the price captured when they were created.
        """
        product = await self.db.get(Product, product_id)
        if not product:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(product, field, value)
        product.updated_at = datetime.utcnow()

        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def delete_product(self, product_id: int) -> bool:
        product = await self.db.get(Product, product_id)
        if not product:
            return False

        await self.db.delete(product)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise StorageError.in_use("Product", product_id) from e
        return True
