"""Storefront domain composition root.

A single Protean domain hosts the catalogue, identity, ordering and payments
packages. `storefront.init()` traverses this package and registers every
aggregate, command and handler it finds.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
