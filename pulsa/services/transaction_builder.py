"""Rebuild nested transaction aggregates from flat history rows.

The history query joins transactions, users, merchants, transaction details
and products, so a transaction with N lines arrives as N rows. The builder
folds them back into one ``TransactionAggregate`` per transaction.
"""

from typing import Any, Iterable

from pulsa.schemas.transaction import (
    MerchantSummary,
    ProductSummary,
    TransactionAggregate,
    TransactionDetailView,
    UserSummary,
)
from pulsa.utils.helpers import format_transaction_date


class TransactionAggregateBuilder:
    """Group history rows by transaction id.

    Output order is the order in which each transaction id first appears,
    so the caller's ORDER BY decides aggregate order. Lines keep row order
    and are keyed by detail id, so a detail repeated by the join is kept once.

    Rows must expose the labels selected by the history query
    (``transaction_id``, ``customer_name``, ..., ``product_price``).
    """

    def __init__(self) -> None:
        self._aggregates: dict[int, TransactionAggregate] = {}
        self._details: dict[int, dict[int, TransactionDetailView]] = {}

    def add_row(self, row: Any) -> None:
        """Fold one joined row into its aggregate."""
        aggregate = self._aggregates.get(row.transaction_id)
        if aggregate is None:
            aggregate = TransactionAggregate(
                id=row.transaction_id,
                customer_name=row.customer_name,
                destination_number=row.destination_number,
                transaction_date=format_transaction_date(row.transaction_date),
                user=UserSummary(id=row.user_id, username=row.username, role=row.role),
                merchant=MerchantSummary(
                    id=row.merchant_id, name=row.merchant_name, address=row.address
                ),
            )
            self._aggregates[row.transaction_id] = aggregate
            self._details[row.transaction_id] = {}

        self._details[row.transaction_id].setdefault(
            row.detail_id,
            TransactionDetailView(
                id=row.detail_id,
                transaction_id=row.transaction_id,
                price=row.detail_price,
                product=ProductSummary(
                    id=row.product_id,
                    name_provider=row.name_provider,
                    nominal=row.nominal,
                    price=row.product_price,
                ),
            ),
        )

    def add_rows(self, rows: Iterable[Any]) -> "TransactionAggregateBuilder":
        for row in rows:
            self.add_row(row)
        return self

    def build(self) -> list[TransactionAggregate]:
        """Return the aggregates with their lines attached."""
        aggregates = []
        for transaction_id, aggregate in self._aggregates.items():
            aggregate.transaction_detail = list(self._details[transaction_id].values())
            aggregates.append(aggregate)
        return aggregates
