"""Domain elements of every storefront context.

`storefront.init()` only scans this directory and its immediate
subdirectories. Aggregates, events, repositories, commands and handlers live
one level further down (``catalogue/product/product.py``), so they are
imported here to register them before the domain resolves its registry.
"""

# Catalogue
from storefront.catalogue.banner import banner, management as banner_management, repository as banner_repository  # noqa: F401
from storefront.catalogue.category import category, events as category_events  # noqa: F401
from storefront.catalogue.category import management as category_management  # noqa: F401
from storefront.catalogue.category import repository as category_repository  # noqa: F401
from storefront.catalogue.product import events as product_events, product  # noqa: F401
from storefront.catalogue.product import management as product_management  # noqa: F401
from storefront.catalogue.product import repository as product_repository  # noqa: F401

# Identity
from storefront.identity.user import events as user_events, registration, user  # noqa: F401
from storefront.identity.user import repository as user_repository  # noqa: F401

# Ordering
from storefront.ordering.checkout import authorization, checkout, confirmation  # noqa: F401
from storefront.ordering.order import events as order_events, order, payment, status  # noqa: F401
from storefront.ordering.order import repository as order_repository  # noqa: F401
