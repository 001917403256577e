"""Pulsa Reseller Backend - Transaction service.

Submits customer orders against a merchant balance and reads order history.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select

from pulsa.core.exceptions import InsufficientFundsError, StorageError, ValidationError
from pulsa.models.merchant import Merchant
from pulsa.models.product import Product
from pulsa.models.transaction import Transaction, TransactionDetail
from pulsa.models.user import User
from pulsa.schemas.transaction import (
    TransactionAggregate,
    TransactionCreate,
    TransactionDetailResponse,
    TransactionResponse,
)
from pulsa.services.transaction_builder import TransactionAggregateBuilder
from pulsa.utils.helpers import format_transaction_date, parse_transaction_date

logger = logging.getLogger(__name__)


def merchant_balance_for_update(merchant_id: int) -> Select:
    """SELECT the merchant balance with an exclusive row lock.

    The lock is held until the surrounding transaction ends, so concurrent
    submissions against one merchant run one after another.
    """
    return select(Merchant.balance).where(Merchant.id == merchant_id).with_for_update()


def history_query() -> Select:
    """Flat join of transactions with user, merchant, details and products."""
    return (
        select(
            Transaction.id.label("transaction_id"),
            Transaction.customer_name,
            Transaction.destination_number,
            Transaction.transaction_date,
            User.id.label("user_id"),
            User.username,
            User.role,
            Merchant.id.label("merchant_id"),
            Merchant.name.label("merchant_name"),
            Merchant.address,
            TransactionDetail.id.label("detail_id"),
            TransactionDetail.price.label("detail_price"),
            Product.id.label("product_id"),
            Product.name_provider,
            Product.nominal,
            Product.price.label("product_price"),
        )
        .select_from(Transaction)
        .join(User, Transaction.user_id == User.id)
        .join(Merchant, Transaction.merchant_id == Merchant.id)
        .join(TransactionDetail, TransactionDetail.transaction_id == Transaction.id)
        .join(Product, TransactionDetail.product_id == Product.id)
    )


class TransactionService:
    """Service for pulsa transactions.

    ``submit`` owns its unit of work: it opens a dedicated session from the
    factory, and that session is the only handle the submission steps use.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    # =========================================================================
    # Submit
    # =========================================================================

    async def submit(self, user_id: int, data: TransactionCreate) -> TransactionResponse:
        """Create an order and debit the merchant balance atomically.

        Args:
            user_id: Submitting user
            data: Order with merchant, customer, date and product lines

        Returns:
            The stored order with generated ids and catalog line prices

        Raises:
            ValidationError: Malformed transaction date (no database access)
            InsufficientFundsError: Balance below the order's total nominal
            StorageError: Missing merchant/product or database failure
        """
        logger.info(
            "Starting transaction for merchant %s by user %s (%d lines)",
            data.merchant_id,
            user_id,
            len(data.transaction_detail),
        )
        try:
            transaction_date = parse_transaction_date(data.transaction_date)
        except ValidationError:
            logger.warning("Invalid transaction date %r", data.transaction_date)
            raise

        try:
            async with self._session_factory() as session, session.begin():
                response, new_balance = await self._submit_in_unit(
                    session, user_id, data, transaction_date
                )
        except SQLAlchemyError as e:
            logger.error("Transaction for merchant %s rolled back: %s", data.merchant_id, e)
            raise StorageError(
                "Failed to store transaction",
                {"merchant_id": data.merchant_id},
            ) from e

        logger.info(
            "Transaction %s created, merchant %s balance now %s",
            response.id,
            data.merchant_id,
            new_balance,
        )
        return response

    async def _submit_in_unit(
        self,
        session: AsyncSession,
        user_id: int,
        data: TransactionCreate,
        transaction_date: date,
    ) -> tuple[TransactionResponse, Decimal]:
        current_balance = await self._lock_merchant_balance(session, data.merchant_id)

        total_nominal = Decimal("0")
        for line in data.transaction_detail:
            total_nominal += await self._product_value(session, Product.nominal, line.product_id)

        if current_balance < total_nominal:
            logger.warning(
                "Insufficient balance for merchant %s: required %s, available %s",
                data.merchant_id,
                total_nominal,
                current_balance,
            )
            raise InsufficientFundsError(required=total_nominal, available=current_balance)

        transaction = Transaction(
            merchant_id=data.merchant_id,
            user_id=user_id,
            customer_name=data.customer_name,
            destination_number=data.destination_number,
            transaction_date=transaction_date,
        )
        session.add(transaction)
        await session.flush()

        details: list[TransactionDetail] = []
        for line in data.transaction_detail:
            detail = TransactionDetail(
                transaction_id=transaction.id,
                product_id=line.product_id,
                price=line.price,
            )
            session.add(detail)
            await session.flush()
            # Caller price is replaced by the catalog sell price
            detail.price = await self._product_value(session, Product.price, line.product_id)
            details.append(detail)

        new_balance = await self._debit_merchant(
            session, data.merchant_id, total_nominal, current_balance
        )

        response = TransactionResponse(
            id=transaction.id,  # type: ignore[arg-type]
            merchant_id=transaction.merchant_id,
            user_id=transaction.user_id,
            customer_name=transaction.customer_name,
            destination_number=transaction.destination_number,
            transaction_date=format_transaction_date(transaction.transaction_date),
            transaction_detail=[
                TransactionDetailResponse(
                    id=d.id,  # type: ignore[arg-type]
                    transaction_id=d.transaction_id,
                    product_id=d.product_id,
                    price=d.price,
                )
                for d in details
            ],
        )
        return response, new_balance

    async def _lock_merchant_balance(self, session: AsyncSession, merchant_id: int) -> Decimal:
        result = await session.execute(merchant_balance_for_update(merchant_id))
        balance = result.scalar_one_or_none()
        if balance is None:
            logger.error("Merchant %s not found", merchant_id)
            raise StorageError.not_found("Merchant", merchant_id)
        logger.info("Locked merchant %s with balance %s", merchant_id, balance)
        return Decimal(balance)

    async def _product_value(self, session: AsyncSession, column: Any, product_id: int) -> Decimal:
        """Read one money column (nominal or price) of a product."""
        result = await session.execute(select(column).where(Product.id == product_id))
        value = result.scalar_one_or_none()
        if value is None:
            logger.error("Product %s not found", product_id)
            raise StorageError.not_found("Product", product_id)
        return Decimal(value)

    async def _debit_merchant(
        self,
        session: AsyncSession,
        merchant_id: int,
        amount: Decimal,
        current_balance: Decimal,
    ) -> Decimal:
        """Subtract the order's nominal total from the locked merchant row."""
        result = await session.execute(
            update(Merchant)
            .where(Merchant.id == merchant_id)
            .values(balance=Merchant.balance - amount, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise StorageError.not_found("Merchant", merchant_id)
        # Row is locked, so the stored balance is exactly this
        return current_balance - amount

    # =========================================================================
    # History
    # =========================================================================

    async def list_by_user(self, user_id: int) -> list[TransactionAggregate]:
        """List transactions of the merchant(s) owned by ``user_id``.

        Newest transaction date first; lines in insertion order.
        """
        logger.info("Listing transactions for user %s", user_id)
        owned_merchants = select(Merchant.id).where(Merchant.user_id == user_id)
        query = (
            history_query()
            .where(Transaction.merchant_id.in_(owned_merchants))  # type: ignore[attr-defined]
            .order_by(
                Transaction.transaction_date.desc(),  # type: ignore[attr-defined]
                Transaction.id,
                TransactionDetail.id,
            )
        )
        rows = await self._fetch_rows(query)
        aggregates = TransactionAggregateBuilder().add_rows(rows).build()
        logger.info("Found %d transactions for user %s", len(aggregates), user_id)
        return aggregates

    async def get_by_id(self, transaction_id: int) -> TransactionAggregate:
        """Get one transaction with its lines.

        An unknown id yields an empty aggregate (id 0, no lines), not an error.
        """
        logger.info("Retrieving transaction %s", transaction_id)
        query = (
            history_query()
            .where(Transaction.id == transaction_id)
            .order_by(TransactionDetail.id)
        )
        rows = await self._fetch_rows(query)
        aggregates = TransactionAggregateBuilder().add_rows(rows).build()
        if not aggregates:
            logger.info("Transaction %s has no rows", transaction_id)
            return TransactionAggregate()
        return aggregates[0]

    async def _fetch_rows(self, query: Select) -> list:
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                return list(result.all())
        except SQLAlchemyError as e:
            logger.error("Failed to read transaction history: %s", e)
            raise StorageError("Failed to retrieve transactions") from e
