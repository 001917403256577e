"""Tests for transaction history reads and the aggregate builder."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from pulsa.schemas.transaction import TransactionAggregate, TransactionCreate, TransactionDetailCreate
from pulsa.services.transaction_builder import TransactionAggregateBuilder


def order(merchant_id: int, day: str, *product_ids: int) -> TransactionCreate:
    return TransactionCreate(
        merchant_id=merchant_id,
        customer_name=f"Customer {day}",
        destination_number="081300000000",
        transaction_date=day,
        transaction_detail=[TransactionDetailCreate(product_id=p) for p in product_ids],
    )


async def test_list_by_user_groups_lines_newest_first(service, seed):
    p10, p25 = seed.product_10k.id, seed.product_25k.id
    older = await service.submit(seed.merchant_user.id, order(seed.merchant.id, "01-01-2024", p10, p25))
    newer = await service.submit(seed.merchant_user.id, order(seed.merchant.id, "10-02-2024", p25, p10))
    # Another merchant's sale must not show up
    await service.submit(seed.other_user.id, order(seed.other_merchant.id, "05-02-2024", p10))

    history = await service.list_by_user(seed.merchant_user.id)

    assert [t.id for t in history] == [newer.id, older.id]
    assert [t.transaction_date for t in history] == ["10-02-2024", "01-01-2024"]
    assert all(len(t.transaction_detail) == 2 for t in history)
    assert [d.product.id for d in history[0].transaction_detail] == [p25, p10]
    assert [d.id for d in history[1].transaction_detail] == [
        d.id for d in older.transaction_detail
    ]

    first = history[0]
    assert first.user.id == seed.merchant_user.id
    assert first.user.username == "budi"
    assert first.merchant.name == "Budi Cell"
    assert first.merchant.address == "Jl. Merdeka 1"
    assert first.transaction_detail[0].product.nominal == Decimal("25000")
    assert first.transaction_detail[0].product.price == Decimal("26500")


async def test_list_by_user_without_merchant_is_empty(service, seed):
    assert await service.list_by_user(seed.admin_user.id) == []


async def test_get_by_id_returns_full_aggregate(service, seed):
    created = await service.submit(
        seed.merchant_user.id,
        order(seed.merchant.id, "20-03-2024", seed.product_10k.id, seed.product_25k.id),
    )

    found = await service.get_by_id(created.id)

    assert found.id == created.id
    assert found.customer_name == "Customer 20-03-2024"
    assert found.transaction_date == "20-03-2024"
    assert found.merchant.id == seed.merchant.id
    assert [d.id for d in found.transaction_detail] == [d.id for d in created.transaction_detail]
    assert [d.price for d in found.transaction_detail] == [Decimal("11500"), Decimal("26500")]


async def test_get_by_id_unknown_returns_empty_aggregate(service, seed):
    found = await service.get_by_id(123456)

    assert found == TransactionAggregate()
    assert found.id == 0
    assert found.transaction_detail == []


def history_row(transaction_id: int, detail_id: int, product_id: int, day: date) -> SimpleNamespace:
    return SimpleNamespace(
        transaction_id=transaction_id,
        customer_name="Rina",
        destination_number="085600000000",
        transaction_date=day,
        user_id=7,
        username="rina",
        role="merchant",
        merchant_id=3,
        merchant_name="Rina Cell",
        address="Jl. Mawar",
        detail_id=detail_id,
        detail_price=Decimal("6500"),
        product_id=product_id,
        name_provider="Indosat",
        nominal=Decimal("5000"),
        product_price=Decimal("6500"),
    )


def test_builder_keeps_first_seen_order_and_line_order():
    rows = [
        history_row(2, 20, 1, date(2024, 5, 2)),
        history_row(2, 21, 2, date(2024, 5, 2)),
        history_row(1, 10, 2, date(2024, 5, 1)),
        history_row(1, 11, 1, date(2024, 5, 1)),
    ]

    aggregates = TransactionAggregateBuilder().add_rows(rows).build()

    assert [a.id for a in aggregates] == [2, 1]
    assert [d.id for d in aggregates[0].transaction_detail] == [20, 21]
    assert [d.id for d in aggregates[1].transaction_detail] == [10, 11]
    assert aggregates[0].transaction_date == "02-05-2024"


def test_builder_drops_repeated_detail_rows():
    rows = [
        history_row(5, 50, 1, date(2024, 6, 1)),
        history_row(5, 50, 1, date(2024, 6, 1)),
        history_row(5, 51, 2, date(2024, 6, 1)),
    ]

    (aggregate,) = TransactionAggregateBuilder().add_rows(rows).build()

    assert [d.id for d in aggregate.transaction_detail] == [50, 51]
    assert aggregate.merchant.name == "Rina Cell"
    assert aggregate.user.username == "rina"


def test_builder_with_no_rows_builds_nothing():
    assert TransactionAggregateBuilder().build() == []
