"""Cart package: models, storage adapters, and manager facade."""
from .models import CartItem, Cart, add_item, remove_item, set_quantity, empty_cart
from .storage import CartStorage, MemoryStorage, RedisStorage
from .service import CartManager, get_cart_manager

__all__ = [
    "CartItem",
    "Cart",
    "add_item",
    "remove_item",
    "set_quantity",
    "empty_cart",
    "CartStorage",
    "MemoryStorage",
    "RedisStorage",
    "CartManager",
    "get_cart_manager",
]
