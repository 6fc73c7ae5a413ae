"""Customer Repository - Customer CRUD operations."""
from typing import Any, Dict, List, Optional

from eticaret.services.models import Customer

from .base import BaseRepository


class CustomerRepository(BaseRepository):
    """Customer database operations."""

    table = "customers"

    async def get_all(self) -> List[Customer]:
        """Get all customers, newest first."""
        result = await self.query().select("*").order("created_at", desc=True).execute()
        return [Customer(**c) for c in result.data]

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        result = await self.query().select("*").eq("id", customer_id).execute()
        return Customer(**result.data[0]) if result.data else None

    async def get_by_phone(self, phone: str) -> Optional[Customer]:
        """Get customer by phone number (checkout identifies guests by phone)."""
        result = await self.query().select("*").eq("phone", phone).limit(1).execute()
        return Customer(**result.data[0]) if result.data else None

    async def create(self, data: Dict[str, Any]) -> Customer:
        result = await self.query().insert(data).execute()
        return Customer(**result.data[0])

    async def update(self, customer_id: str, data: Dict[str, Any]) -> Optional[Customer]:
        result = await self.query().update(data).eq("id", customer_id).execute()
        return Customer(**result.data[0]) if result.data else None
