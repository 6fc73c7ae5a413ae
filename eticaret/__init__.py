"""
eticaret - storefront core

This package contains:
- cart: client-side cart engine (models, storage adapters, manager)
- db: Supabase and Upstash Redis clients
- services: money helpers, entity models, repositories, checkout, slugs
- logging: logger configuration

Note: Imports are lazy so importing the package does not pull in the
Supabase client.
"""

__all__ = [
    "get_cart_manager",
    "get_database",
    "get_database_async",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "get_cart_manager":
        from eticaret.cart import get_cart_manager
        return get_cart_manager
    elif name == "get_database":
        from eticaret.services.database import get_database
        return get_database
    elif name == "get_database_async":
        from eticaret.services.database import get_database_async
        return get_database_async
    raise AttributeError(f"module 'eticaret' has no attribute '{name}'")
