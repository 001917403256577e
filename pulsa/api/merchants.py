"""Pulsa - Merchant API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pulsa.api.deps import AdminUser, CurrentUser, get_merchant_service
from pulsa.models.merchant import Merchant
from pulsa.schemas.merchant import MerchantCreate, MerchantResponse, MerchantUpdate
from pulsa.schemas.pagination import CustomPage
from pulsa.services.merchant_service import MerchantService

router = APIRouter(tags=["Merchants"])

MerchantServiceDep = Annotated[MerchantService, Depends(get_merchant_service)]


def _not_found(merchant_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"merchant with ID {merchant_id} not found",
    )


@router.post("/merchant", response_model=MerchantResponse, status_code=status.HTTP_201_CREATED)
async def create_merchant(
    data: MerchantCreate,
    _: AdminUser,
    service: MerchantServiceDep,
) -> Merchant:
    """Create a merchant for an existing user. Admin only."""
    try:
        return await service.create_merchant(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/merchants", response_model=CustomPage[MerchantResponse])
async def list_merchants(
    _: CurrentUser,
    service: MerchantServiceDep,
    search: str | None = Query(default=None, description="Search by merchant name"),
) -> CustomPage[MerchantResponse]:
    """List merchants with pagination."""
    return await service.list_merchants(search=search)


@router.get("/merchant/{merchant_id}", response_model=MerchantResponse)
async def get_merchant(
    merchant_id: int,
    _: CurrentUser,
    service: MerchantServiceDep,
) -> Merchant:
    """Get merchant by ID."""
    merchant = await service.get_merchant(merchant_id)
    if not merchant:
        raise _not_found(merchant_id)
    return merchant


@router.put("/merchant/{merchant_id}", response_model=MerchantResponse)
async def update_merchant(
    merchant_id: int,
    data: MerchantUpdate,
    _: AdminUser,
    service: MerchantServiceDep,
) -> Merchant:
    """Update merchant name, address or balance. Admin only.

    ``balance`` replaces the stored value; it is not added to it.
    """
    merchant = await service.update_merchant(merchant_id, data)
    if not merchant:
        raise _not_found(merchant_id)
    return merchant


@router.delete("/merchant/{merchant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_merchant(
    merchant_id: int,
    _: AdminUser,
    service: MerchantServiceDep,
) -> None:
    """Delete a merchant. Admin only."""
    if not await service.delete_merchant(merchant_id):
        raise _not_found(merchant_id)
