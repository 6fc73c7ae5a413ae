"""Category Repository - Category tree operations."""
from typing import Any, Dict, List, Optional

from eticaret.services.models import Category

from .base import BaseRepository


class CategoryRepository(BaseRepository):
    """Category database operations."""

    table = "categories"

    async def get_all(self) -> List[Category]:
        """Get active categories in display order."""
        result = await self.query().select("*").eq("is_active", True).order("sort_order").execute()
        return [Category(**c) for c in result.data]

    async def get_with_hierarchy(self) -> List[Category]:
        """Get top-level categories, each with its direct children attached."""
        categories = await self.get_all()
        top_level = [c for c in categories if not c.parent_id]
        return [
            parent.model_copy(update={"children": [c for c in categories if c.parent_id == parent.id]})
            for parent in top_level
        ]

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        result = await self.query().select("*").eq("id", category_id).execute()
        return Category(**result.data[0]) if result.data else None

    async def create(self, data: Dict[str, Any]) -> Category:
        result = await self.query().insert(data).execute()
        return Category(**result.data[0])

    async def update(self, category_id: str, data: Dict[str, Any]) -> Optional[Category]:
        result = await self.query().update(data).eq("id", category_id).execute()
        return Category(**result.data[0]) if result.data else None

    async def delete(self, category_id: str) -> None:
        await self.query().delete().eq("id", category_id).execute()
