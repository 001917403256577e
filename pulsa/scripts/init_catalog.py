"""Bootstrap an admin user and the default pulsa product catalog.

Clerk only authenticates users that already exist locally, so the first
admin has to be inserted by hand.

Usage:
    uv run python -m pulsa.scripts.init_catalog --admin-clerk-id user_xxx --admin-username admin
"""

import argparse
import asyncio
from decimal import Decimal

from sqlmodel import select

from pulsa.db.engine import close_db, get_session
from pulsa.models.product import Product
from pulsa.models.user import User, UserRole

# (provider, nominal, sell price)
DEFAULT_PRODUCTS = [
    ("Telkomsel", Decimal("5000"), Decimal("6500")),
    ("Telkomsel", Decimal("10000"), Decimal("11500")),
    ("Telkomsel", Decimal("25000"), Decimal("26500")),
    ("Indosat", Decimal("5000"), Decimal("6300")),
    ("Indosat", Decimal("10000"), Decimal("11300")),
    ("XL", Decimal("10000"), Decimal("11200")),
    ("XL", Decimal("25000"), Decimal("26200")),
    ("Tri", Decimal("10000"), Decimal("11000")),
]


async def init_admin(clerk_id: str, username: str) -> None:
    """Create the admin user if no user has this Clerk ID yet."""
    async with get_session() as session:
        result = await session.execute(select(User).where(User.clerk_id == clerk_id))
        if result.scalar_one_or_none():
            print(f"User with Clerk ID {clerk_id} already exists, skipping.")
            return

        session.add(User(clerk_id=clerk_id, username=username, role=UserRole.ADMIN))
        print(f"Created admin user {username} ({clerk_id})")


async def init_products() -> None:
    """Create default products when the catalog is empty."""
    async with get_session() as session:
        result = await session.execute(select(Product))
        existing = result.scalars().all()

        if existing:
            print(f"Found {len(existing)} existing products, skipping catalog seed.")
            return

        for provider, nominal, price in DEFAULT_PRODUCTS:
            session.add(Product(name_provider=provider, nominal=nominal, price=price))

        print(f"Created {len(DEFAULT_PRODUCTS)} products:")
        for provider, nominal, price in DEFAULT_PRODUCTS:
            print(f"  - {provider} {nominal} (sell {price})")


async def main(args: argparse.Namespace) -> None:
    """Main function with proper cleanup."""
    try:
        if args.admin_clerk_id:
            await init_admin(args.admin_clerk_id, args.admin_username)
        if not args.skip_products:
            await init_products()
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed admin user and product catalog")
    parser.add_argument("--admin-clerk-id", type=str, help="Clerk user ID of the first admin")
    parser.add_argument("--admin-username", type=str, default="admin", help="Admin username")
    parser.add_argument("--skip-products", action="store_true", help="Do not seed products")
    asyncio.run(main(parser.parse_args()))
