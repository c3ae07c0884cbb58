"""Storefront domain — catalogue, accounts, cart, orders and invoicing.

A single bounded context: checkout has to read the cart, price it against the
catalogue and clear the cart inside one unit of work, so every aggregate lives
in the same domain.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="storefront")

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
