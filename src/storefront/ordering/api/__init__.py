"""Ordering domain API package."""

from storefront.ordering.api.routes import admin_router, cart_router, checkout_router, order_router

__all__ = ["cart_router", "checkout_router", "order_router", "admin_router"]
