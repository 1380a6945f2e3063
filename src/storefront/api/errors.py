"""Exception-to-response mapping for the storefront API.

Protean's handlers cover the domain exceptions (validation → 400 and so
on); the handlers here add the storefront's own failures and a catch-all
that never leaks internal detail. Every error body has the shape
``{"error": ...}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.ordering.checkout.checkout import CheckoutAlreadyConfirmed
from storefront.payments.gateway.port import PaymentGatewayError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _messages(exc: Exception):
    """Protean exceptions carry their payload in ``messages``; fall back to the text."""
    return getattr(exc, "messages", None) or str(exc)


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(ValidationError)
    async def invalid(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": _messages(exc)})

    @app.exception_handler(ObjectNotFoundError)
    async def not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": _messages(exc)})

    @app.exception_handler(CheckoutAlreadyConfirmed)
    async def already_confirmed(request: Request, exc: CheckoutAlreadyConfirmed) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": str(exc), "orderId": exc.order_id})

    @app.exception_handler(PaymentGatewayError)
    async def gateway_error(request: Request, exc: PaymentGatewayError) -> JSONResponse:
        logger.error("payment_gateway.error", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=502, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "request.unhandled_error",
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
