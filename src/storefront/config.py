"""Environment-driven settings.

Every value is read on access so tests can flip them with ``monkeypatch.setenv``.
"""

import os

DEFAULT_SESSION_SECRET = "storefront-dev-session-secret"


def environment() -> str:
    return (os.getenv("PROTEAN_ENV") or "development").lower()


def is_production() -> bool:
    return environment() == "production"


def session_secret() -> str:
    return os.getenv("SESSION_SECRET", DEFAULT_SESSION_SECRET)


def currency() -> str:
    """Currency used for payment intents (lowercase ISO 4217, as processors expect)."""
    return os.getenv("STOREFRONT_CURRENCY", "usd").lower()


def seed_enabled() -> bool:
    return os.getenv("STOREFRONT_SEED", "true").lower() not in ("0", "false", "no")


def stripe_secret_key() -> str | None:
    return os.getenv("STRIPE_SECRET_KEY") or None


def stripe_webhook_secret() -> str | None:
    return os.getenv("STRIPE_WEBHOOK_SECRET") or None
