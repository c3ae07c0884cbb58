"""Order placement — turns the shopper's cart into an order and empties the cart.

The order write and the cart clear happen in the same handler, so they share
one Unit of Work and commit together.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront
from storefront.order.order import MIN_SHIPPING_ADDRESS_LENGTH, Order


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    shipping_address = Text(required=True)
    phone_number = String(max_length=30)
    payment_method = String(max_length=50)
    vat_number = String(max_length=30)
    notes = Text()


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        if len((command.shipping_address or "").strip()) < MIN_SHIPPING_ADDRESS_LENGTH:
            raise ValidationError(
                {"shipping_address": [f"Shipping address must be at least {MIN_SHIPPING_ADDRESS_LENGTH} characters"]}
            )

        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.for_customer(command.customer_id)
        if cart is None or cart.is_empty():
            raise ValidationError({"cart": ["Cart is empty"]})

        products = current_domain.repository_for(Product)
        lines = []
        missing = []
        for item in cart.items:
            try:
                lines.append((products.get(item.product_id), item.quantity))
            except ObjectNotFoundError:
                missing.append(str(item.product_id))

        if missing:
            raise ValidationError({"cart": [f"Products no longer available: {', '.join(missing)}"]})

        order = Order.place(
            customer_id=command.customer_id,
            lines=lines,
            shipping_address=command.shipping_address,
            phone_number=command.phone_number,
            payment_method=command.payment_method,
            vat_number=command.vat_number,
            notes=command.notes,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            total=order.total,
            item_count=len(lines),
        )
        return str(order.id)
