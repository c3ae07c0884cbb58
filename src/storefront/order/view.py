"""Read-side helpers: orders joined with their items and the items' products."""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.order.order import Order, OrderItem


@dataclass(frozen=True)
class OrderLine:
    item: OrderItem
    product: Product | None


@dataclass(frozen=True)
class OrderDetail:
    order: Order
    lines: list[OrderLine]


def _product_or_none(product_id) -> Product | None:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None


def order_detail(order: Order) -> OrderDetail:
    lines = [OrderLine(item=item, product=_product_or_none(item.product_id)) for item in order.items]
    return OrderDetail(order=order, lines=lines)


def orders_for_customer(customer_id) -> list[OrderDetail]:
    """Newest first."""
    orders = current_domain.repository_for(Order).for_customer(customer_id)
    return [order_detail(order) for order in orders]
