"""Cart models: immutable cart values and the pure transitions over them."""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional
from uuid import uuid4

from eticaret.services.models import Product
from eticaret.services.money import multiply, round_money, to_float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value) -> datetime:
    """Parse an ISO-8601 timestamp, including the browser's trailing 'Z' form."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be an ISO-8601 string, got {type(value).__name__}")
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass(frozen=True)
class CartItem:
    """One line of the cart: a product snapshot, an optional variant and a quantity."""
    id: str
    product: Product
    quantity: int
    selected_variant: Optional[str] = None
    added_at: datetime = field(default_factory=_utcnow)

    @property
    def unit_price(self) -> Decimal:
        """Effective price of one unit."""
        return self.product.effective_price

    @property
    def line_total(self) -> Decimal:
        """Unrounded price for all units; the cart rounds once after summing."""
        return multiply(self.unit_price, self.quantity)

    def matches(self, product_id: str, variant: Optional[str] = None) -> bool:
        """True when this line has the identity key (product_id, variant)."""
        return self.product.id == product_id and self.selected_variant == variant

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape."""
        data = {
            "id": self.id,
            "product": self.product.model_dump(mode="json"),
            "quantity": self.quantity,
        }
        # Absent variant is omitted, not stored as null
        if self.selected_variant is not None:
            data["selectedVariant"] = self.selected_variant
        data["addedAt"] = self.added_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from the stored JSON shape."""
        quantity = int(data["quantity"])
        if quantity < 1:
            raise ValueError(f"stored quantity must be positive, got {quantity}")
        variant = data.get("selectedVariant")
        return cls(
            id=str(data["id"]),
            product=Product.model_validate(data["product"]),
            quantity=quantity,
            selected_variant=str(variant) if variant is not None else None,
            added_at=_parse_timestamp(data["addedAt"]),
        )


def calculate_totals(items: Iterable[CartItem]) -> tuple[int, Decimal]:
    """
    Recompute (total_items, total_amount) from scratch.

    The amount is rounded to kuruş once, after summation.
    """
    total_items = 0
    total_amount = Decimal("0")
    for item in items:
        total_items += item.quantity
        total_amount += item.line_total
    return total_items, round_money(total_amount)


def _merge_duplicate_lines(items: Iterable[CartItem]) -> tuple[CartItem, ...]:
    """Fold lines with the same identity key into the earliest one."""
    merged: dict[tuple[str, Optional[str]], CartItem] = {}
    seen_ids = set()
    for item in items:
        if item.id in seen_ids:
            raise ValueError(f"duplicate line-item id {item.id!r}")
        seen_ids.add(item.id)

        key = (item.product.id, item.selected_variant)
        first = merged.get(key)
        if first is None:
            merged[key] = item
        else:
            merged[key] = replace(first, quantity=first.quantity + item.quantity)
    return tuple(merged.values())


def _check_quantity(quantity) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError("quantity must be an integer")


@dataclass(frozen=True)
class Cart:
    """
    Shopping cart value.

    ``total_items`` and ``total_amount`` are not constructor arguments: they
    are recomputed from ``items`` every time a Cart is built, so a Cart can
    never carry totals that disagree with its lines.
    """
    items: tuple[CartItem, ...] = ()
    updated_at: datetime = field(default_factory=_utcnow)
    total_items: int = field(init=False, default=0)
    total_amount: Decimal = field(init=False, default=Decimal("0"))

    def __post_init__(self):
        items = tuple(self.items)
        total_items, total_amount = calculate_totals(items)
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "total_items", total_items)
        object.__setattr__(self, "total_amount", total_amount)

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0

    def find(self, product_id: str, variant: Optional[str] = None) -> Optional[CartItem]:
        """Line with the given identity key, if any."""
        return next((item for item in self.items if item.matches(product_id, variant)), None)

    def get_item(self, item_id: str) -> Optional[CartItem]:
        """Line with the given line-item id, if any."""
        return next((item for item in self.items if item.id == item_id), None)

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape."""
        return {
            "items": [item.to_dict() for item in self.items],
            "totalItems": self.total_items,
            "totalAmount": to_float(self.total_amount),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """
        Create from the stored JSON shape.

        Stored totals are ignored; they are recomputed from the items.
        Lines sharing a (product id, variant) are merged into the first one.

        Raises:
            ValueError: If two lines share a line-item id
        """
        items = _merge_duplicate_lines(CartItem.from_dict(item) for item in data.get("items", []))
        return cls(items=items, updated_at=_parse_timestamp(data["updatedAt"]))


def empty_cart() -> Cart:
    """New cart with no lines, stamped now."""
    return Cart()


def generate_item_id(product_id: str, variant: Optional[str], existing_ids: Iterable[str] = ()) -> str:
    """Fresh line-item id that does not collide with ``existing_ids``."""
    taken = set(existing_ids)
    while True:
        item_id = f"{product_id}-{variant or 'default'}-{uuid4().hex[:12]}"
        if item_id not in taken:
            return item_id


def add_item(cart: Cart, product: Product, quantity: int = 1, variant: Optional[str] = None) -> Cart:
    """
    Add ``quantity`` units of ``product`` (in ``variant``) to the cart.

    A line with the same (product id, variant) absorbs the quantity in place;
    otherwise a new line is appended with a deep copy of ``product``.

    Raises:
        ValueError: If quantity is not a positive integer
    """
    _check_quantity(quantity)
    if quantity < 1:
        raise ValueError("quantity must be a positive integer")

    existing = cart.find(product.id, variant)
    if existing is not None:
        merged = replace(existing, quantity=existing.quantity + quantity)
        items = tuple(merged if item is existing else item for item in cart.items)
    else:
        new_item = CartItem(
            id=generate_item_id(product.id, variant, (item.id for item in cart.items)),
            product=product.model_copy(deep=True),
            quantity=quantity,
            selected_variant=variant,
        )
        items = cart.items + (new_item,)

    return Cart(items=items)


def remove_item(cart: Cart, item_id: str) -> Cart:
    """Drop the line with ``item_id``. Unknown ids return ``cart`` itself."""
    if cart.get_item(item_id) is None:
        return cart
    return Cart(items=tuple(item for item in cart.items if item.id != item_id))


def set_quantity(cart: Cart, item_id: str, quantity: int) -> Cart:
    """
    Set a line's quantity; zero or negative removes the line.

    Raises:
        ValueError: If quantity is not an integer
    """
    _check_quantity(quantity)
    if quantity <= 0:
        return remove_item(cart, item_id)

    if cart.get_item(item_id) is None:
        return cart

    return Cart(
        items=tuple(
            replace(item, quantity=quantity) if item.id == item_id else item
            for item in cart.items
        )
    )
