"""URL-safe slugs shared by products and categories."""

import re

from protean.exceptions import ValidationError

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str) -> str:
    """Derive a slug from free text: lowercase, alphanumerics joined by single hyphens."""
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def ensure_url_safe(field: str, slug: str | None) -> None:
    if slug is None:
        return
    if not SLUG_PATTERN.match(slug):
        raise ValidationError({field: [f"'{slug}' is not a valid slug (lowercase letters, digits and single hyphens)"]})
