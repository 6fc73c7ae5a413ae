"""Product Repository - Product catalog operations."""
from typing import Any, Dict, List, Optional

from eticaret.services.models import Product
from eticaret.services.slugs import create_slug

from .base import BaseRepository

# Products are always fetched with their category name for listing pages
PRODUCT_WITH_CATEGORY = "*, categories (id, name)"

DEFAULT_PAGE_SIZE = 10


def _quote_filter_value(value: str) -> str:
    """Double-quote a value for a PostgREST logic filter so commas and parentheses stay literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class ProductRepository(BaseRepository):
    """Product database operations."""

    table = "products"

    async def get_all(
        self,
        category_id: Optional[str] = None,
        is_active: Optional[bool] = None,
        is_featured: Optional[bool] = None,
        is_campaign: Optional[bool] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Product]:
        """Get products, newest first, with optional filters and paging."""
        query = self.query().select(PRODUCT_WITH_CATEGORY)

        if category_id:
            query = query.eq("category_id", category_id)
        if is_active is not None:
            query = query.eq("is_active", is_active)
        if is_featured is not None:
            query = query.eq("is_featured", is_featured)
        if is_campaign is not None:
            query = query.eq("is_campaign", is_campaign)

        query = query.order("created_at", desc=True)

        if limit:
            query = query.limit(limit)
        if offset:
            query = query.range(offset, offset + (limit or DEFAULT_PAGE_SIZE) - 1)

        result = await query.execute()
        return [Product(**p) for p in result.data]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID with its category."""
        result = await self.query().select(PRODUCT_WITH_CATEGORY).eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def get_by_slug(self, slug: str) -> Optional[Product]:
        """
        Find an active product by slug.

        Rows without a stored slug are matched on the slug generated from
        their name, so pages work before the slug backfill has run.
        """
        result = await self.query().select(PRODUCT_WITH_CATEGORY).eq("slug", slug).execute()
        if result.data:
            return Product(**result.data[0])

        for product in await self.get_all(is_active=True):
            if create_slug(product.name) == slug:
                return product
        return None

    async def search(self, query: str) -> List[Product]:
        """Search active products by name or description."""
        pattern = _quote_filter_value(f"%{query}%")
        result = await self.query().select(PRODUCT_WITH_CATEGORY).or_(
            f"name.ilike.{pattern},description.ilike.{pattern}"
        ).eq("is_active", True).execute()
        return [Product(**p) for p in result.data]

    async def get_without_slug(self) -> List[Product]:
        """Products whose slug is null or empty."""
        result = await self.query().select("*").or_("slug.is.null,slug.eq.").execute()
        return [Product(**p) for p in result.data]

    async def create(self, data: Dict[str, Any]) -> Product:
        """Create new product; a slug is derived from the name when missing."""
        if not data.get("slug") and data.get("name"):
            data = {**data, "slug": create_slug(data["name"])}
        result = await self.query().insert(data).execute()
        return Product(**result.data[0])

    async def update(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        result = await self.query().update(data).eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def delete(self, product_id: str) -> None:
        await self.query().delete().eq("id", product_id).execute()
