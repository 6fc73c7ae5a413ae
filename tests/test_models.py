"""
Tests for Pydantic models
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from eticaret.services.models import (
    Category,
    Customer,
    DashboardStats,
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    Product,
    Setting,
)


class TestProduct:
    """Tests for Product."""

    def test_price_is_decimal(self, sample_product):
        product = Product(**sample_product)

        assert product.price == Decimal("100.0")
        assert isinstance(product.price, Decimal)
        assert product.campaign_price is None

    def test_effective_price(self, sample_campaign_product):
        product = Product(**sample_campaign_product)

        assert product.effective_price == Decimal("40.0")

    def test_zero_campaign_price_falls_back(self, sample_campaign_product):
        product = Product(**{**sample_campaign_product, "campaign_price": 0})

        assert product.effective_price == Decimal("50.0")

    def test_unknown_columns_kept(self, sample_product):
        product = Product(**sample_product)

        assert product.model_dump()["categories"]["name"] == "Temizlik Ürünleri"

    def test_json_dump_uses_numbers(self, sample_campaign_product):
        data = Product(**sample_campaign_product).model_dump(mode="json")

        assert data["price"] == 50.0
        assert data["campaign_price"] == 40.0

    def test_frozen(self, sample_product):
        product = Product(**sample_product)

        with pytest.raises(ValidationError):
            product.price = Decimal("1")

    def test_list_columns_are_tuples(self, sample_product):
        product = Product(**sample_product)

        assert product.image_urls == ("https://cdn.example.com/camasir-suyu.jpg",)
        assert product.tags == ("temizlik",)
        assert product.model_dump(mode="json")["image_urls"] == ["https://cdn.example.com/camasir-suyu.jpg"]

    def test_requires_price(self):
        with pytest.raises(ValidationError):
            Product(id="p", name="No price")


class TestOtherModels:
    """Tests for the remaining table models."""

    def test_category_children_default(self, sample_category):
        category = Category(**sample_category)

        assert category.children == []
        assert category.sort_order == 1

    def test_customer_total_spent(self, sample_customer):
        customer = Customer(**sample_customer)

        assert customer.total_spent == Decimal("420.5")

    def test_order_with_joined_items(self, sample_order):
        order = Order(**{
            **sample_order,
            "customers": {"id": "customer-1", "name": "Ayşe Yılmaz", "phone": "05551234567"},
            "order_items": [{
                "id": "oi-1",
                "order_id": "order-1",
                "product_id": "product-123",
                "product_name": "Çamaşır Suyu 5 L",
                "product_price": 100,
                "quantity": 3,
                "total_price": 300,
                "products": {"id": "product-123", "name": "Çamaşır Suyu 5 L"},
            }],
        })

        assert order.total_amount == Decimal("340.0")
        assert order.order_items[0].total_price == Decimal("300")
        assert order.customers["name"] == "Ayşe Yılmaz"

    def test_order_item_price(self):
        item = OrderItem(product_id="p", product_name="P", product_price=12.5, quantity=2, total_price=25)

        assert item.product_price == Decimal("12.5")

    def test_setting_json_value(self):
        setting = Setting(id="s-1", key="shipping", value={"free_over": 500})

        assert setting.value["free_over"] == 500

    def test_dashboard_defaults(self):
        stats = DashboardStats()

        assert stats.today_orders == 0
        assert stats.pending_orders == []

    def test_enum_values(self):
        assert OrderStatus.SHIPPED == "shipped"
        assert PaymentMethod.BANK_TRANSFER == "bank_transfer"
