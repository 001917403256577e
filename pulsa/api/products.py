"""Pulsa - Product catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pulsa.api.deps import AdminUser, CurrentUser, get_product_service
from pulsa.models.product import Product
from pulsa.schemas.pagination import CustomPage
from pulsa.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from pulsa.services.product_service import ProductService

router = APIRouter(tags=["Products"])

ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"product with ID {product_id} not found",
    )


@router.post("/product", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    _: AdminUser,
    service: ProductServiceDep,
) -> Product:
    return await service.create_product(data)


@router.get("/products", response_model=CustomPage[ProductResponse])
async def list_products(
    _: CurrentUser,
    service: ProductServiceDep,
    provider: str | None = Query(default=None, description="Filter by provider name"),
) -> CustomPage[ProductResponse]:
    return await service.list_products(provider=provider)


@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    _: CurrentUser,
    service: ProductServiceDep,
) -> Product:
    product = await service.get_product(product_id)
    if not product:
        raise _not_found(product_id)
    return product


@router.put("/product/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    data: ProductUpdate,
    _: AdminUser,
    service: ProductServiceDep,
) -> Product:
    product = await service.update_product(product_id, data)
    if not product:
        raise _not_found(product_id)
    return product


@router.delete("/product/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    _: AdminUser,
    service: ProductServiceDep,
) -> None:
    if not await service.delete_product(product_id):
        raise _not_found(product_id)
