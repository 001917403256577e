"""Pulsa - Transaction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from pulsa.api.deps import CurrentUser, get_transaction_service
from pulsa.schemas.transaction import (
    TransactionAggregate,
    TransactionCreate,
    TransactionResponse,
)
from pulsa.services.transaction_service import TransactionService

router = APIRouter(tags=["Transactions"])

TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]


@router.post(
    "/transaction",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    user: CurrentUser,
    data: TransactionCreate,
    service: TransactionServiceDep,
) -> TransactionResponse:
    """Sell pulsa products to a customer.

    The merchant balance is debited by the products' nominal value; each
    line is priced at the catalog sell price.
    """
    return await service.submit(user.id, data)  # type: ignore[arg-type]


@router.get("/transactions/history", response_model=list[TransactionAggregate])
async def list_transactions(
    user: CurrentUser,
    service: TransactionServiceDep,
) -> list[TransactionAggregate]:
    """List transactions of the merchant owned by the current user."""
    return await service.list_by_user(user.id)  # type: ignore[arg-type]


@router.get("/transaction/history/{transaction_id}", response_model=TransactionAggregate)
async def get_transaction(
    transaction_id: int,
    _: CurrentUser,
    service: TransactionServiceDep,
) -> TransactionAggregate:
    """Get transaction detail.

    Unknown ids return an empty transaction rather than 404.
    """
    return await service.get_by_id(transaction_id)
