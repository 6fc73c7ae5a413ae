"""Key-value storage adapters for the persisted cart."""
from typing import Optional, Protocol

from upstash_redis import Redis

from eticaret.db import get_redis_sync, StorageKeys, TTL


class CartStorage(Protocol):
    """
    What the cart engine needs from a store.

    ``set`` and ``delete`` raise on failure; the engine decides what a
    failure means.
    """

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed store. Lives as long as the process."""

    def __init__(self, data: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class RedisStorage:
    """
    Upstash Redis store.

    Records expire after ``ttl`` seconds so abandoned carts are evicted.
    """

    def __init__(self, client: Optional[Redis] = None, ttl: int = TTL.CART):
        self._redis = client  # Lazy initialization
        self.ttl = ttl

    @property
    def redis(self) -> Redis:
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = get_redis_sync()
        return self._redis

    def get(self, key: str) -> Optional[str]:
        value = self.redis.get(key)
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else str(value)

    def set(self, key: str, value: str) -> None:
        self.redis.set(key, value, ex=self.ttl)

    def delete(self, key: str) -> None:
        self.redis.delete(key)


__all__ = ["CartStorage", "MemoryStorage", "RedisStorage", "StorageKeys", "TTL"]
