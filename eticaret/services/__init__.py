"""Storefront services: money, models, data store, checkout, slugs."""
