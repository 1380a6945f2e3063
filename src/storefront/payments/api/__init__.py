"""Payments API package."""

from storefront.payments.api.routes import gateway_router, webhook_router

__all__ = ["webhook_router", "gateway_router"]
