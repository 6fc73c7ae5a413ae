"""Database Models - Pydantic models for the storefront tables."""
from decimal import Decimal
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, field_serializer, field_validator

from eticaret.services.money import to_decimal as _to_decimal, to_float as _to_float


class OrderStatus(str, Enum):
    """Order status values. Any transition is allowed."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    """Payment options offered at checkout."""
    CASH_ON_DELIVERY = "cash_on_delivery"
    BANK_TRANSFER = "bank_transfer"
    CREDIT_CARD = "credit_card"


class Category(BaseModel):
    """Category model. ``children`` is only filled by the hierarchy query."""
    id: str
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = None
    image_url: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    children: list["Category"] = []

    class Config:
        extra = "ignore"


class Product(BaseModel):
    """
    Product model.

    Also used as the cart's product snapshot, so unknown columns (joined
    ``categories`` and the like) are kept and the model is immutable.
    """
    id: str
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    price: Decimal
    campaign_price: Optional[Decimal] = None
    category_id: Optional[str] = None
    image_urls: tuple[str, ...] = ()
    stock_quantity: int = 0
    min_stock_level: int = 0
    sku: Optional[str] = None
    variants: Optional[Any] = None
    is_active: bool = True
    is_featured: bool = False
    is_campaign: bool = False
    campaign_start_date: Optional[datetime] = None
    campaign_end_date: Optional[datetime] = None
    weight: Optional[Decimal] = None
    dimensions: Optional[Any] = None
    tags: tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        extra = "allow"
        frozen = True

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("campaign_price", "weight", mode="before")
    @classmethod
    def convert_optional_to_decimal(cls, v):
        return _to_decimal(v) if v is not None else None

    @field_serializer("price", "campaign_price", "weight")
    def serialize_money(self, v: Optional[Decimal]) -> Optional[float]:
        # Stored snapshots keep prices as JSON numbers
        return _to_float(v) if v is not None else None

    @property
    def effective_price(self) -> Decimal:
        """Campaign price when a campaign is on and has a price, else list price."""
        if self.is_campaign and self.campaign_price:
            return self.campaign_price
        return self.price


class Customer(BaseModel):
    """Customer model (guest checkout, keyed by phone)."""
    id: str
    name: str
    phone: str
    email: Optional[str] = None
    address: str
    notes: Optional[str] = None
    total_orders: int = 0
    total_spent: Decimal = Decimal("0")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        extra = "ignore"

    @field_validator("total_spent", mode="before")
    @classmethod
    def convert_spent_to_decimal(cls, v):
        return _to_decimal(v)


class OrderItem(BaseModel):
    """Order item model (one row per cart line)."""
    id: Optional[str] = None
    order_id: Optional[str] = None
    product_id: str
    product_name: str
    product_price: Decimal
    quantity: int
    total_price: Decimal
    product_variant: Optional[Any] = None
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"

    @field_validator("product_price", "total_price", mode="before")
    @classmethod
    def convert_prices_to_decimal(cls, v):
        return _to_decimal(v)


class Order(BaseModel):
    """Order model.

    ``customers`` and ``order_items`` are present only when the query joins them.
    """
    id: str
    order_number: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: str
    customer_phone: str
    customer_address: str
    payment_method: str = PaymentMethod.CASH_ON_DELIVERY.value
    status: str = OrderStatus.PENDING.value
    subtotal: Decimal
    shipping_cost: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    total_amount: Decimal
    notes: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    customers: Optional[dict] = None
    order_items: list[OrderItem] = []

    class Config:
        extra = "ignore"

    @field_validator("subtotal", "shipping_cost", "tax_amount", "total_amount", mode="before")
    @classmethod
    def convert_amounts_to_decimal(cls, v):
        return _to_decimal(v)


class Setting(BaseModel):
    """Site setting (key -> JSON value)."""
    id: str
    key: str
    value: Any = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        extra = "ignore"


class DashboardStats(BaseModel):
    """Admin dashboard figures."""
    today_orders: int = 0
    week_orders: int = 0
    today_revenue: Decimal = Decimal("0")
    week_revenue: Decimal = Decimal("0")
    pending_orders: list[Order] = []
