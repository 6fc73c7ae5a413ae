"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client.

    Query builders chain synchronously; only ``execute`` is awaited.
    """
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.or_.return_value = table_mock
    table_mock.limit.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.range.return_value = table_mock
    table_mock.gte.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock
    return client


@pytest.fixture
def mock_database(mock_supabase_client):
    """Database wired to the mock client"""
    from eticaret.services.database import Database

    return Database(mock_supabase_client)


@pytest.fixture
def memory_storage():
    from eticaret.cart import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def cart_manager(memory_storage):
    from eticaret.cart import CartManager

    return CartManager(memory_storage)


@pytest.fixture
def sample_category():
    """Sample category row"""
    return {
        "id": "cat-1",
        "name": "Temizlik Ürünleri",
        "description": "Ev ve endüstriyel temizlik",
        "parent_id": None,
        "image_url": None,
        "sort_order": 1,
        "is_active": True,
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z"
    }


@pytest.fixture
def sample_product():
    """Sample product row (as returned with the category join)"""
    return {
        "id": "product-123",
        "name": "Çamaşır Suyu 5 L",
        "slug": "camasir-suyu-5-l",
        "description": "Yoğun kıvamlı çamaşır suyu",
        "price": 100.0,
        "campaign_price": None,
        "category_id": "cat-1",
        "image_urls": ["https://cdn.example.com/camasir-suyu.jpg"],
        "stock_quantity": 40,
        "min_stock_level": 5,
        "sku": "CS-5L",
        "variants": None,
        "is_active": True,
        "is_featured": True,
        "is_campaign": False,
        "tags": ["temizlik"],
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z",
        "categories": {"id": "cat-1", "name": "Temizlik Ürünleri"}
    }


@pytest.fixture
def sample_campaign_product():
    """Sample product on campaign"""
    return {
        "id": "product-456",
        "name": "Streç Film 30 cm",
        "description": None,
        "price": 50.0,
        "campaign_price": 40.0,
        "category_id": "cat-2",
        "image_urls": [],
        "stock_quantity": 12,
        "is_active": True,
        "is_campaign": True,
    }


@pytest.fixture
def sample_customer():
    """Sample customer row"""
    return {
        "id": "customer-1",
        "name": "Ayşe Yılmaz",
        "phone": "05551234567",
        "email": None,
        "address": "Atatürk Cad. No: 5, Kadıköy, İstanbul",
        "notes": None,
        "total_orders": 2,
        "total_spent": 420.5,
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z"
    }


@pytest.fixture
def sample_order():
    """Sample order row"""
    return {
        "id": "order-1",
        "order_number": "SIP-0001",
        "customer_id": "customer-1",
        "customer_name": "Ayşe Yılmaz",
        "customer_phone": "05551234567",
        "customer_address": "Atatürk Cad. No: 5, Kadıköy, İstanbul",
        "payment_method": "cash_on_delivery",
        "status": "pending",
        "subtotal": 340.0,
        "shipping_cost": 0,
        "tax_amount": 0,
        "total_amount": 340.0,
        "notes": None,
        "admin_notes": None,
        "created_at": "2025-01-02T10:00:00Z",
        "updated_at": "2025-01-02T10:00:00Z"
    }
