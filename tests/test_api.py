"""HTTP tests for the transaction and catalog endpoints."""

from decimal import Decimal

from pulsa.models import Product

API = "/api/v1"


def order_body(merchant_id: int, *product_ids: int, date: str = "15-01-2024") -> dict:
    return {
        "merchant_id": merchant_id,
        "customer_name": "Andi",
        "destination_number": "081234567890",
        "transaction_date": date,
        "transaction_detail": [{"product_id": p, "price": 0} for p in product_ids],
    }


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_create_transaction(client, seed, probe):
    response = await client.post(
        f"{API}/transaction",
        json=order_body(seed.merchant.id, seed.product_10k.id, seed.product_25k.id),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["merchant_id"] == seed.merchant.id
    assert body["user_id"] == seed.merchant_user.id
    assert body["transaction_date"] == "15-01-2024"
    assert [Decimal(d["price"]) for d in body["transaction_detail"]] == [
        Decimal("11500"),
        Decimal("26500"),
    ]
    assert await probe.balance(seed.merchant.id) == Decimal("65000")


async def test_create_transaction_insufficient_balance(client, seed, probe, current_user):
    current_user["user"] = seed.other_user
    response = await client.post(
        f"{API}/transaction",
        json=order_body(seed.other_merchant.id, *[seed.product_25k.id] * 3),
    )

    assert response.status_code == 422
    body = response.json()
    assert "Insufficient merchant balance" in body["detail"]
    assert Decimal(body["required"]) == Decimal("75000")
    assert Decimal(body["available"]) == Decimal("50000")
    assert await probe.transaction_rows() == (0, 0)


async def test_create_transaction_bad_date(client, seed):
    response = await client.post(
        f"{API}/transaction",
        json=order_body(seed.merchant.id, seed.product_10k.id, date="2024-01-15"),
    )

    assert response.status_code == 400
    assert response.json()["transaction_date"] == "2024-01-15"


async def test_create_transaction_unknown_merchant(client, seed):
    response = await client.post(
        f"{API}/transaction",
        json=order_body(9999, seed.product_10k.id),
    )

    assert response.status_code == 404
    assert response.json()["entity"] == "Merchant"


async def test_create_transaction_requires_a_line(client, seed):
    response = await client.post(f"{API}/transaction", json=order_body(seed.merchant.id))

    assert response.status_code == 422


async def test_transaction_history(client, seed):
    created = await client.post(
        f"{API}/transaction",
        json=order_body(seed.merchant.id, seed.product_10k.id),
    )
    transaction_id = created.json()["id"]

    listed = await client.get(f"{API}/transactions/history")
    assert listed.status_code == 200
    (item,) = listed.json()
    assert item["id"] == transaction_id
    assert item["merchant"]["name"] == "Budi Cell"
    assert item["user"]["username"] == "budi"
    assert item["transaction_detail"][0]["product"]["name_provider"] == "Telkomsel"

    detail = await client.get(f"{API}/transaction/history/{transaction_id}")
    assert detail.status_code == 200
    assert detail.json() == item


async def test_transaction_history_unknown_id_is_empty(client, seed):
    response = await client.get(f"{API}/transaction/history/777")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 0
    assert body["transaction_detail"] == []


async def test_me_includes_owned_merchant(client, seed):
    response = await client.get(f"{API}/auth/me")

    assert response.status_code == 200
    assert response.json()["merchant_id"] == seed.merchant.id
    assert response.json()["role"] == "merchant"


async def test_list_products_paginated(client, seed):
    response = await client.get(f"{API}/products", params={"page": 1, "page_size": 1})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["page"] == 1
    assert body["page_size"] == 1
    assert len(body["items"]) == 1


async def test_product_writes_require_admin(client, seed):
    response = await client.post(
        f"{API}/product",
        json={"name_provider": "XL", "nominal": "5000", "price": "6000"},
    )

    assert response.status_code == 403


async def test_product_crud_as_admin(client, seed, current_user):
    current_user["user"] = seed.admin_user

    created = await client.post(
        f"{API}/product",
        json={"name_provider": "XL", "nominal": "5000", "price": "6000"},
    )
    assert created.status_code == 201
    product_id = created.json()["id"]

    updated = await client.put(f"{API}/product/{product_id}", json={"price": "6250"})
    assert updated.status_code == 200
    assert Decimal(updated.json()["price"]) == Decimal("6250")
    assert updated.json()["name_provider"] == "XL"

    filtered = await client.get(f"{API}/products", params={"provider": "XL"})
    assert [p["id"] for p in filtered.json()["items"]] == [product_id]

    deleted = await client.delete(f"{API}/product/{product_id}")
    assert deleted.status_code == 204

    missing = await client.get(f"{API}/product/{product_id}")
    assert missing.status_code == 404


async def test_merchant_crud_as_admin(client, seed, current_user):
    current_user["user"] = seed.admin_user

    created = await client.post(
        f"{API}/merchant",
        json={"user_id": seed.admin_user.id, "name": "Admin Cell", "balance": "1000"},
    )
    assert created.status_code == 201
    merchant_id = created.json()["id"]

    topped_up = await client.put(f"{API}/merchant/{merchant_id}", json={"balance": "5000"})
    assert topped_up.status_code == 200
    assert Decimal(topped_up.json()["balance"]) == Decimal("5000")

    assert (await client.delete(f"{API}/merchant/{merchant_id}")).status_code == 204
    assert (await client.get(f"{API}/merchant/{merchant_id}")).status_code == 404


async def test_create_merchant_for_unknown_user(client, seed, current_user):
    current_user["user"] = seed.admin_user

    response = await client.post(f"{API}/merchant", json={"user_id": 9999, "name": "Ghost"})

    assert response.status_code == 400


async def test_users_are_admin_only(client, seed, current_user):
    assert (await client.get(f"{API}/users")).status_code == 403

    current_user["user"] = seed.admin_user
    response = await client.get(f"{API}/users", params={"role": "merchant"})

    assert response.status_code == 200
    assert {u["username"] for u in response.json()["items"]} == {"budi", "sari"}


async def test_admin_cannot_delete_self(client, seed, current_user):
    current_user["user"] = seed.admin_user

    response = await client.delete(f"{API}/user/{seed.admin_user.id}")

    assert response.status_code == 400


async def test_delete_rows_referenced_by_a_transaction_conflicts(
    client, seed, current_user, probe
):
    created = await client.post(
        f"{API}/transaction",
        json=order_body(seed.merchant.id, seed.product_10k.id),
    )
    assert created.status_code == 201
    current_user["user"] = seed.admin_user

    product = await client.delete(f"{API}/product/{seed.product_10k.id}")
    merchant = await client.delete(f"{API}/merchant/{seed.merchant.id}")
    user = await client.delete(f"{API}/user/{seed.merchant_user.id}")

    assert [product.status_code, merchant.status_code, user.status_code] == [409, 409, 409]
    assert product.json()["entity"] == "Product"
    assert product.json()["reason"] == "in_use"
    assert "still referenced" in merchant.json()["detail"]
    assert await probe.count(Product) == 2
    assert await probe.balance(seed.merchant.id) == Decimal("90000")


async def test_delete_unreferenced_product(client, seed, current_user, probe):
    current_user["user"] = seed.admin_user

    response = await client.delete(f"{API}/product/{seed.product_25k.id}")

    assert response.status_code == 204
    assert await probe.count(Product) == 1
