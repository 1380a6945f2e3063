"""FastAPI application factory for the storefront.

Every request runs inside the storefront domain context, so route handlers
can use ``current_domain`` to process commands and reach repositories.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from storefront import config
from storefront.api.errors import register_error_handlers
from storefront.catalogue.api import banner_router, category_router, product_router
from storefront.domain import storefront
from storefront.identity.api import router as identity_router
from storefront.ordering.api import admin_router, cart_router, checkout_router, order_router
from storefront.payments.api import gateway_router, webhook_router
from storefront.utils.logging import add_context, clear_context


def create_app() -> FastAPI:
    """Build the storefront API. ``storefront.init()`` must have run first."""
    app = FastAPI(
        title="Storefront API",
        description="Catalogue, cart, checkout and order management",
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and bind request log context."""
        add_context(method=request.method, path=request.url.path)
        try:
            with storefront.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response

    app.add_middleware(
        SessionMiddleware,
        secret_key=config.session_secret(),
        session_cookie="storefront_session",
        same_site="lax",
        https_only=config.is_production(),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(identity_router)
    app.include_router(category_router)
    app.include_router(product_router)
    app.include_router(banner_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(order_router)
    app.include_router(admin_router)
    app.include_router(webhook_router)
    if not config.is_production():
        app.include_router(gateway_router)

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
