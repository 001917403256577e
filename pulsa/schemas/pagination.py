"""Paginated list responses for catalog and admin endpoints.

List endpoints (merchants, products, users) accept ``?page=1&page_size=20``
and return ``{"items": [...], "total": n, "page": 1, "page_size": 20, "pages": k}``.

Usage:
    from pulsa.schemas.pagination import CustomPage

    @router.get("/products", response_model=CustomPage[ProductResponse])
    async def list_products(service: ...) -> CustomPage[ProductResponse]:
        return await service.list_products()
"""

from typing import TypeVar

from fastapi import Query
from fastapi_pagination import Page
from fastapi_pagination.customization import CustomizedPage, UseFieldsAliases, UseParamsFields

__all__ = ["CustomPage"]

T = TypeVar("T")

CustomPage = CustomizedPage[
    Page[T],
    UseParamsFields(
        size=Query(20, ge=1, le=100, alias="page_size", description="Page size"),
    ),
    UseFieldsAliases(
        size="page_size",
    ),
]
