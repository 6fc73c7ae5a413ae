"""
Repository Pattern for Database Operations

One repository per backend table:
- CategoryRepository: Category tree
- ProductRepository: Product catalog, search, slugs
- CustomerRepository: Guest customers
- OrderRepository: Orders, order items, dashboard figures
- SettingsRepository: Site settings
"""
from .category_repo import CategoryRepository
from .product_repo import ProductRepository
from .customer_repo import CustomerRepository
from .order_repo import OrderRepository
from .settings_repo import SettingsRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
    "CustomerRepository",
    "OrderRepository",
    "SettingsRepository",
]
