"""
Shared error messages.

Kept in one place so services and tests agree on the wording.
"""

# Orders / checkout
ERROR_CART_EMPTY = "Cart is empty"
ERROR_INVALID_ORDER_STATUS = "Invalid order status"
ERROR_CHECKOUT_INVALID = "Checkout form is invalid"

# Cart storage
ERROR_CART_STORAGE_UNAVAILABLE = "Cart storage unavailable"

# Configuration
ERROR_SUPABASE_CONFIG = "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set"
ERROR_REDIS_CONFIG = "UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set"
