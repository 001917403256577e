"""API module - route handlers and common dependencies."""

from fastapi import FastAPI

from pulsa.api.deps import AdminUser, CurrentUser
from pulsa.api.errors import register_error_handlers

__all__ = [
    "AdminUser",
    "CurrentUser",
    "register_error_handlers",
    "register_routers",
]


def register_routers(app: FastAPI, prefix: str) -> None:
    """Register all API routers to the application.

    Args:
        app: FastAPI application instance
        prefix: Common route prefix (e.g. ``/api/v1``)
    """
    # Auth
    from pulsa.api.auth import router as auth_router

    app.include_router(auth_router, prefix=prefix)

    # Transactions
    from pulsa.api.transactions import router as transactions_router

    app.include_router(transactions_router, prefix=prefix)

    # Merchants & Products
    from pulsa.api.merchants import router as merchants_router
    from pulsa.api.products import router as products_router

    app.include_router(merchants_router, prefix=prefix)
    app.include_router(products_router, prefix=prefix)

    # User management
    from pulsa.api.users import router as users_router

    app.include_router(users_router, prefix=prefix)
