"""Base repository with shared Supabase client."""

from supabase._async.client import AsyncClient


class BaseRepository:
    """Base class for all repositories.

    Holds the async Supabase client; every query is awaited.
    """

    table: str = ""

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    def query(self):
        """Start a query builder on this repository's table."""
        return self.client.table(self.table)
