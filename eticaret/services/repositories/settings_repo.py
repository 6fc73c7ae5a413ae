"""Settings Repository - Site settings (key/value) operations."""
from datetime import datetime, timezone
from typing import Any, List, Optional

from eticaret.services.models import Setting

from .base import BaseRepository


class SettingsRepository(BaseRepository):
    """Settings database operations."""

    table = "settings"

    async def get_all(self) -> List[Setting]:
        result = await self.query().select("*").order("key").execute()
        return [Setting(**s) for s in result.data]

    async def get_by_key(self, key: str) -> Optional[Setting]:
        result = await self.query().select("*").eq("key", key).execute()
        return Setting(**result.data[0]) if result.data else None

    async def update_by_key(self, key: str, value: Any) -> Optional[Setting]:
        """Replace a setting's value and stamp updated_at."""
        data = {"value": value, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = await self.query().update(data).eq("key", key).execute()
        return Setting(**result.data[0]) if result.data else None
