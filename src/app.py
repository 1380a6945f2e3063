"""Storefront FastAPI application.

Web server that processes commands synchronously via HTTP inside the
storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the Protean config overlay and the log renderer.
from storefront import config
from storefront.domain import storefront

storefront.init()

from storefront.web import create_app  # noqa: E402

app = create_app()

# ---------------------------------------------------------------------------
# Demo data
# ---------------------------------------------------------------------------
if config.seed_enabled():
    from storefront.seed import seed  # noqa: E402

    with storefront.domain_context():
        seed()
