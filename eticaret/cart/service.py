"""Cart manager: the cart's public operations, persisted through a key-value store."""
import json
from decimal import Decimal
from typing import Optional, Union

from pydantic import ValidationError

from eticaret.errors import ERROR_CART_STORAGE_UNAVAILABLE
from eticaret.logging import get_logger, sanitize_id_for_logging
from eticaret.services.models import Product
from eticaret.services.money import format_money, to_float
from . import models
from .models import Cart
from .storage import CartStorage, RedisStorage, StorageKeys

logger = get_logger(__name__)


class CartManager:
    """
    Manages the shopper's cart.

    Every mutating call builds a new Cart from the old one, saves it and
    returns it. Storage problems are logged and swallowed: the returned Cart
    is still valid for the rest of the session even if it was not persisted.

    Usage:
        manager = CartManager(MemoryStorage())
        cart = manager.load()
        cart = manager.add_item(cart, product, quantity=2)
        manager.format_price(cart.total_amount)
    """

    def __init__(self, storage: Optional[CartStorage] = None, key: str = StorageKeys.CART):
        self.storage = storage if storage is not None else RedisStorage()
        self.key = key

    def create_empty(self) -> Cart:
        """Empty cart stamped now. Not persisted."""
        return models.empty_cart()

    def load(self) -> Cart:
        """
        Read the persisted cart.

        Returns:
            The stored cart, or an empty one when nothing is stored, the
            record is corrupt, or the store cannot be reached
        """
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.error(f"{ERROR_CART_STORAGE_UNAVAILABLE}, starting with empty cart: {e}")
            return self.create_empty()

        if not raw:
            return self.create_empty()

        try:
            data = json.loads(raw)
            cart = Cart.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError, ArithmeticError, RecursionError, ValidationError) as e:
            logger.warning(f"Corrupted cart data under '{self.key}', starting with empty cart: {e}")
            return self.create_empty()

        stored_items = data.get("totalItems")
        stored_amount = data.get("totalAmount")
        if stored_items != cart.total_items or stored_amount != to_float(cart.total_amount):
            logger.warning(
                f"Stored cart totals ({stored_items}, {stored_amount}) disagree with its items "
                f"({cart.total_items}, {cart.total_amount}); using recomputed totals"
            )
        return cart

    def save(self, cart: Cart) -> bool:
        """
        Write ``cart`` under the cart key, replacing what was there.

        Returns:
            True if written, False if the store rejected the write
        """
        try:
            self.storage.set(self.key, json.dumps(cart.to_dict(), ensure_ascii=False))
            return True
        except Exception as e:
            logger.error(f"Failed to save cart ({cart.total_items} items): {e}")
            return False

    def add_item(
        self,
        cart: Cart,
        product: Product,
        quantity: int = 1,
        variant: Optional[str] = None,
    ) -> Cart:
        """Add units of a product (merging with an existing line of the same variant)."""
        new_cart = models.add_item(cart, product, quantity, variant)
        self.save(new_cart)
        return new_cart

    def remove_item(self, cart: Cart, item_id: str) -> Cart:
        """Remove a line; unknown ids leave the cart as it was."""
        new_cart = models.remove_item(cart, item_id)
        if new_cart is cart:
            logger.debug(f"remove_item: no line {sanitize_id_for_logging(item_id)} in cart")
        self.save(new_cart)
        return new_cart

    def set_quantity(self, cart: Cart, item_id: str, quantity: int) -> Cart:
        """Set a line's quantity; zero or less removes it."""
        new_cart = models.set_quantity(cart, item_id, quantity)
        self.save(new_cart)
        return new_cart

    # Storefront name for the same operation
    update_quantity = set_quantity

    def clear(self, cart: Optional[Cart] = None) -> Cart:
        """Discard every line and persist the empty cart."""
        empty = self.create_empty()
        self.save(empty)
        return empty

    def is_in_cart(self, cart: Cart, product_id: str, variant: Optional[str] = None) -> bool:
        return cart.find(product_id, variant) is not None

    def quantity_of(self, cart: Cart, product_id: str, variant: Optional[str] = None) -> int:
        item = cart.find(product_id, variant)
        return item.quantity if item else 0

    @staticmethod
    def format_price(amount: Union[int, float, str, Decimal]) -> str:
        """Display string in Turkish lira, e.g. ``₺1.234,50``."""
        return format_money(amount)


# Singleton instance
_cart_manager: Optional[CartManager] = None


def get_cart_manager() -> CartManager:
    """Get CartManager singleton (Redis-backed)."""
    global _cart_manager
    if _cart_manager is None:
        _cart_manager = CartManager()
    return _cart_manager
