"""Invoicing workflow — issue a Diamante invoice for an already placed order.

Preconditions are checked in order, and all of them before any network call:
gateway configured, order exists, order owned by the caller, order not yet
invoiced and in a status that allows invoicing, order has items, customer
exists. A gateway failure is returned as is and leaves the order untouched.
No automatic retries.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.billing.gateway import get_gateway
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront
from storefront.order.order import Order
from storefront.shared.errors import Conflict, Forbidden, ServiceUnavailable


@storefront.command(part_of="Order")
class InvoiceOrder:
    customer_id = Identifier(required=True)
    order_id = Identifier(required=True)


def _resolvable_products(order_items) -> list[Product]:
    repo = current_domain.repository_for(Product)
    products = []
    for item in order_items:
        try:
            products.append(repo.get(item.product_id))
        except ObjectNotFoundError:
            continue
    return products


@storefront.command_handler(part_of=Order)
class InvoiceOrderHandler:
    @handle(InvoiceOrder)
    def invoice_order(self, command):
        gateway = get_gateway()
        if not gateway.is_configured():
            raise ServiceUnavailable("Diamante API is not configured")

        order_repo = current_domain.repository_for(Order)
        order = order_repo.get(command.order_id)

        if not order.belongs_to(command.customer_id):
            raise Forbidden("Access to this order is denied")

        if order.is_invoiced():
            raise Conflict("This order already has a Diamante invoice")

        if not order.can_be_invoiced():
            raise Conflict(f"Orders in status {order.status} cannot be invoiced")

        order_items = list(order.items)
        if not order_items:
            raise ObjectNotFoundError(f"Order {order.id} has no items")

        try:
            user = current_domain.repository_for(User).get(order.customer_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"Customer of order {order.id} not found") from None

        logger.info("invoice_requested", order_id=str(order.id), customer_id=str(command.customer_id))
        result = gateway.create_invoice(order, user, order_items, _resolvable_products(order_items))

        if not result.success:
            logger.error("invoice_failed", order_id=str(order.id), error=result.error_message)
            return result

        order.record_invoice(result.invoice_number, result.invoice_url)
        order_repo.add(order)
        logger.info("order_invoiced", order_id=str(order.id), invoice_number=result.invoice_number)

        if not gateway.sync_inventory(order_items):
            logger.warning("inventory_sync_skipped", order_id=str(order.id))

        return result
