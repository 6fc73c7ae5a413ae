"""Order Repository - Order operations."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from eticaret.errors import ERROR_INVALID_ORDER_STATUS
from eticaret.logging import get_logger, sanitize_id_for_logging
from eticaret.services.models import DashboardStats, Order, OrderStatus
from eticaret.services.money import add

from .base import BaseRepository

logger = get_logger(__name__)

ORDER_WITH_RELATIONS = """
    *,
    customers (id, name, phone),
    order_items (*, products (id, name))
"""

DEFAULT_PAGE_SIZE = 10
DASHBOARD_PENDING_LIMIT = 5


class OrderRepository(BaseRepository):
    """Order database operations."""

    table = "orders"

    async def get_all(
        self,
        status: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Order]:
        """Get orders with customer and items, newest first."""
        query = self.query().select(ORDER_WITH_RELATIONS)

        if status:
            query = query.eq("status", status)

        query = query.order("created_at", desc=True)

        if limit:
            query = query.limit(limit)
        if offset:
            query = query.range(offset, offset + (limit or DEFAULT_PAGE_SIZE) - 1)

        result = await query.execute()
        return [Order(**o) for o in result.data]

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """Get order by ID with customer and items."""
        result = await self.query().select(ORDER_WITH_RELATIONS).eq("id", order_id).execute()
        return Order(**result.data[0]) if result.data else None

    async def create(self, order: Dict[str, Any], items: List[Dict[str, Any]]) -> Order:
        """
        Create an order, then its items.

        The two inserts are not transactional: if the items insert fails the
        order row stays behind and the error propagates.
        """
        result = await self.query().insert(order).execute()
        created = Order(**result.data[0])

        if items:
            rows = [{**item, "order_id": created.id} for item in items]
            await self.client.table("order_items").insert(rows).execute()

        logger.info(f"Order {sanitize_id_for_logging(created.id)} created with {len(items)} items")
        return created

    async def update_status(self, order_id: str, status: str, admin_notes: Optional[str] = None) -> Optional[Order]:
        """
        Set an order's status (any value of OrderStatus, from any status).

        Raises:
            ValueError: If status is not a known OrderStatus value
        """
        try:
            status = OrderStatus(status).value
        except ValueError:
            raise ValueError(f"{ERROR_INVALID_ORDER_STATUS}: {status}")

        data: Dict[str, Any] = {"status": status}
        if admin_notes:
            data["admin_notes"] = admin_notes

        result = await self.query().update(data).eq("id", order_id).execute()
        return Order(**result.data[0]) if result.data else None

    async def get_dashboard_stats(self) -> DashboardStats:
        """Order counts and revenue for today and the last 7 days, plus latest pending orders."""
        now = datetime.now(timezone.utc)
        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_start = now - timedelta(days=7)

        today = await self.query().select("total_amount").gte("created_at", today_start.isoformat()).execute()
        week = await self.query().select("total_amount").gte("created_at", week_start.isoformat()).execute()
        pending = await self.query().select("*").eq(
            "status", OrderStatus.PENDING.value
        ).order("created_at", desc=True).limit(DASHBOARD_PENDING_LIMIT).execute()

        def revenue(rows: List[Dict[str, Any]]) -> Decimal:
            total = Decimal("0")
            for row in rows:
                total = add(total, row.get("total_amount"))
            return total

        return DashboardStats(
            today_orders=len(today.data),
            week_orders=len(week.data),
            today_revenue=revenue(today.data),
            week_revenue=revenue(week.data),
            pending_orders=[Order(**o) for o in pending.data],
        )
