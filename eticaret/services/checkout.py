"""
Checkout Service

Turns the shopper's cart and the checkout form into an order:
1. validate the form
2. find the customer by phone, or create one
3. insert the order and one order item per cart line
4. clear the cart
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError, field_validator

from eticaret.cart import Cart, CartManager
from eticaret.errors import ERROR_CART_EMPTY, ERROR_CHECKOUT_INVALID
from eticaret.logging import get_logger, sanitize_id_for_logging
from eticaret.services.database import Database
from eticaret.services.models import Customer, Order, PaymentMethod
from eticaret.services.money import round_money, to_float

logger = get_logger(__name__)

# Shown next to the form fields, in the storefront's language
REQUIRED_FIELD_MESSAGES = {
    "customer_name": "Ad Soyad zorunludur",
    "customer_phone": "Telefon numarası zorunludur",
    "customer_address": "Adres zorunludur",
}


class CheckoutValidationError(ValueError):
    """Checkout form rejected; ``errors`` maps field name to message."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__(ERROR_CHECKOUT_INVALID)
        self.errors = errors


class CheckoutForm(BaseModel):
    """Guest checkout form."""
    customer_name: str
    customer_phone: str
    customer_address: str
    payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY
    notes: Optional[str] = None

    @field_validator("customer_name", "customer_phone", "customer_address", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("notes", mode="before")
    @classmethod
    def blank_notes_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v or None


class CheckoutService:
    """Places orders from carts."""

    def __init__(self, db: Database, cart_manager: CartManager):
        self.db = db
        self.cart_manager = cart_manager

    @staticmethod
    def validate(data: Dict[str, Any]) -> CheckoutForm:
        """
        Validate raw form input.

        Raises:
            CheckoutValidationError: With one message per bad field
        """
        errors = {
            field: message
            for field, message in REQUIRED_FIELD_MESSAGES.items()
            if not str(data.get(field) or "").strip()
        }
        if errors:
            raise CheckoutValidationError(errors)

        try:
            return CheckoutForm(**data)
        except ValidationError as e:
            raise CheckoutValidationError({str(err["loc"][0]): err["msg"] for err in e.errors()})

    @staticmethod
    def build_order_items(cart: Cart) -> List[Dict[str, Any]]:
        """One order_items row per cart line, priced at the effective price."""
        rows = []
        for item in cart.items:
            row = {
                "product_id": item.product.id,
                "product_name": item.product.name,
                "product_price": to_float(item.unit_price),
                "quantity": item.quantity,
                "total_price": to_float(round_money(item.line_total)),
            }
            if item.selected_variant is not None:
                row["product_variant"] = item.selected_variant
            rows.append(row)
        return rows

    async def get_or_create_customer(self, form: CheckoutForm) -> Customer:
        """Reuse the customer with this phone number, else register a new one."""
        customer = await self.db.customers.get_by_phone(form.customer_phone)
        if customer is not None:
            return customer

        customer = await self.db.customers.create({
            "name": form.customer_name,
            "phone": form.customer_phone,
            "address": form.customer_address,
        })
        logger.info(f"New customer {sanitize_id_for_logging(customer.id)} registered at checkout")
        return customer

    async def place_order(self, cart: Cart, form: CheckoutForm) -> Order:
        """
        Create the order for ``cart`` and clear the cart.

        The cart is only cleared once the order and its items are stored;
        backend errors propagate and leave the cart untouched.

        Raises:
            ValueError: If the cart is empty
        """
        if cart.is_empty:
            raise ValueError(ERROR_CART_EMPTY)

        customer = await self.get_or_create_customer(form)

        order_data = {
            "customer_id": customer.id,
            "customer_name": form.customer_name,
            "customer_phone": form.customer_phone,
            "customer_address": form.customer_address,
            "payment_method": form.payment_method.value,
            "subtotal": to_float(cart.total_amount),
            "total_amount": to_float(cart.total_amount),
            "notes": form.notes,
        }
        order = await self.db.orders.create(order_data, self.build_order_items(cart))

        self.cart_manager.clear(cart)
        logger.info(
            f"Order {sanitize_id_for_logging(order.id)} placed: "
            f"{cart.total_items} units, {self.cart_manager.format_price(cart.total_amount)}"
        )
        return order
