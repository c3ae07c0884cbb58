"""Cart item management — commands and handler.

Every command names the shopper it acts for. Item ids are only ever resolved
inside that shopper's cart, so an id belonging to someone else is reported as
not found.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront


@storefront.command(part_of="ShoppingCart")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="ShoppingCart")
class UpdateCartQuantity:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="ShoppingCart")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command(part_of="ShoppingCart")
class ClearCart:
    customer_id = Identifier(required=True)


def _cart_of(customer_id) -> ShoppingCart:
    cart = current_domain.repository_for(ShoppingCart).for_customer(customer_id)
    if cart is None:
        raise ObjectNotFoundError("Cart item not found")
    return cart


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        # Raises ObjectNotFoundError for unknown products
        current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_customer(command.customer_id) or ShoppingCart.create(customer_id=command.customer_id)
        item = cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)

        logger.info(
            "cart_item_added",
            customer_id=str(command.customer_id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        cart = _cart_of(command.customer_id)
        cart.update_item_quantity(item_id=command.item_id, new_quantity=command.quantity)
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(command.item_id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = _cart_of(command.customer_id)
        cart.remove_item(item_id=command.item_id)
        current_domain.repository_for(ShoppingCart).add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_customer(command.customer_id)
        if cart is None or cart.is_empty():
            return
        cart.clear()
        repo.add(cart)
