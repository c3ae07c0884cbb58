"""Read-side helpers: cart lines joined with their products, and derived totals.

Totals are computed from current catalogue prices every time they are read.
"""

from dataclasses import dataclass
from decimal import Decimal

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.cart import CartItem, ShoppingCart
from storefront.catalogue.product import Product


@dataclass(frozen=True)
class CartLine:
    item: CartItem
    product: Product | None

    def line_total(self) -> Decimal:
        if self.product is None:
            return Decimal("0.00")
        return self.product.unit_price() * self.item.quantity


@dataclass(frozen=True)
class CartSummary:
    lines: list[CartLine]
    total_items: int
    total_price: Decimal


def cart_lines(customer_id) -> list[CartLine]:
    cart = current_domain.repository_for(ShoppingCart).for_customer(customer_id)
    if cart is None:
        return []

    products = current_domain.repository_for(Product)
    lines = []
    for item in cart.items:
        try:
            product = products.get(item.product_id)
        except ObjectNotFoundError:
            product = None
        lines.append(CartLine(item=item, product=product))
    return lines


def cart_line(customer_id, item_id) -> CartLine:
    line = next((line for line in cart_lines(customer_id) if str(line.item.id) == str(item_id)), None)
    if line is None:
        raise ObjectNotFoundError(f"Cart item {item_id} not found")
    return line


def cart_summary(customer_id) -> CartSummary:
    lines = cart_lines(customer_id)
    return CartSummary(
        lines=lines,
        total_items=sum(line.item.quantity for line in lines),
        total_price=sum((line.line_total() for line in lines), Decimal("0.00")),
    )
