"""
Supabase Database Service

The storefront's data store: one repository per table behind a single
Database object.

Usage:
    from eticaret.services.database import get_database_async

    db = await get_database_async()
    products = await db.products.get_all(is_active=True, is_featured=True)
    order = await db.orders.get_by_id(order_id)
"""

import asyncio
from typing import Optional

from supabase._async.client import AsyncClient

from eticaret.db import get_supabase
from eticaret.logging import get_logger

# Re-export models so callers can import them alongside the database
from eticaret.services.models import Category, Customer, DashboardStats, Order, OrderItem, Product, Setting
from eticaret.services.repositories import (
    CategoryRepository,
    CustomerRepository,
    OrderRepository,
    ProductRepository,
    SettingsRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase-backed data store.

    Must be built with the async client; use Database.create() or
    init_database() rather than the constructor outside tests.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

        self.categories = CategoryRepository(self.client)
        self.products = ProductRepository(self.client)
        self.customers = CustomerRepository(self.client)
        self.orders = OrderRepository(self.client)
        self.settings = SettingsRepository(self.client)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory: connect the async Supabase client and wire repositories."""
        client = await get_supabase()
        return cls(client)


# Singleton
_db: Optional[Database] = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize the database singleton (idempotent)."""
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized")
    return _db


async def get_database_async() -> Database:
    """Get the database, initializing it on first use."""
    if _db is None:
        return await init_database()
    return _db


def get_database() -> Database:
    """
    Get the already-initialized database.

    Raises:
        RuntimeError: If init_database() has not run yet
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Use 'await get_database_async()' for lazy init, "
            "or call 'await init_database()' at startup."
        )
    return _db


__all__ = [
    "Database",
    "init_database",
    "get_database",
    "get_database_async",
    "Category",
    "Customer",
    "DashboardStats",
    "Order",
    "OrderItem",
    "Product",
    "Setting",
]
