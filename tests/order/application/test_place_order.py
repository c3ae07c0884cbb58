"""Application tests for order placement via domain.process()."""

from decimal import Decimal

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.cart.cart import ShoppingCart
from storefront.cart.items import AddToCart
from storefront.catalogue.management import ChangeProductPrice
from storefront.catalogue.product import Product
from storefront.order.order import Order, OrderStatus
from storefront.order.placement import PlaceOrder
from storefront.order.view import orders_for_customer

ADDRESS = "Rua Augusta 10, 1100-053, Lisboa"


def _add(customer_id, product, quantity):
    current_domain.process(
        AddToCart(customer_id=customer_id, product_id=str(product.id), quantity=quantity),
        asynchronous=False,
    )


def _place(customer_id="user-1", shipping_address=ADDRESS, **kwargs):
    return current_domain.process(
        PlaceOrder(customer_id=customer_id, shipping_address=shipping_address, **kwargs),
        asynchronous=False,
    )


def _cart(customer_id="user-1"):
    return current_domain.repository_for(ShoppingCart).for_customer(customer_id)


def _orders(customer_id="user-1"):
    return current_domain.repository_for(Order).for_customer(customer_id)


@pytest.fixture()
def filled_cart(make_product):
    ring = make_product(name="Anel", price="10.00")
    necklace = make_product(name="Colar", price="5.50")
    _add("user-1", ring, 2)
    _add("user-1", necklace, 1)
    return ring, necklace


class TestPlaceOrder:
    def test_total_and_frozen_prices(self, filled_cart):
        ring, necklace = filled_cart

        order = current_domain.repository_for(Order).get(_place(payment_method="mbway"))

        assert order.total_amount() == Decimal("25.50")
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_method == "mbway"
        prices = {str(item.product_id): item.price for item in order.items}
        assert prices == {str(ring.id): "10.00", str(necklace.id): "5.50"}

    def test_cart_is_emptied_and_item_count_matches(self, filled_cart):
        distinct_products = len(_cart().items)

        order = current_domain.repository_for(Order).get(_place())

        assert _cart().is_empty()
        assert len(order.items) == distinct_products

    def test_price_change_after_placement_does_not_affect_order(self, filled_cart):
        ring, _ = filled_cart
        order_id = _place()

        current_domain.process(ChangeProductPrice(product_id=str(ring.id), price="99.00"), asynchronous=False)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.total == "25.50"

    def test_orders_list_newest_first_with_products(self, filled_cart, make_product):
        first_id = _place()
        _add("user-1", make_product(name="Pulseira", price="1.00"), 1)
        second_id = _place()

        details = orders_for_customer("user-1")

        assert [str(d.order.id) for d in details] == [second_id, first_id]
        assert details[0].lines[0].product.name == "Pulseira"


class TestPlaceOrderRejections:
    def test_empty_cart_creates_no_order(self, make_product):
        with pytest.raises(ValidationError) as exc:
            _place()

        assert exc.value.messages == {"cart": ["Cart is empty"]}
        assert _orders() == []

    def test_cart_emptied_by_removals_is_still_empty(self, make_product):
        _add("user-1", make_product(), 1)
        cart = _cart()
        cart.clear()
        current_domain.repository_for(ShoppingCart).add(cart)

        with pytest.raises(ValidationError):
            _place()
        assert _orders() == []

    def test_short_address_leaves_cart_intact(self, filled_cart):
        with pytest.raises(ValidationError) as exc:
            _place(shipping_address="Rua")

        assert "shipping_address" in exc.value.messages
        assert len(_cart().items) == 2
        assert _orders() == []

    def test_missing_product_fails_whole_order(self, filled_cart):
        ring, _ = filled_cart
        repo = current_domain.repository_for(Product)
        repo.remove(repo.get(ring.id))

        with pytest.raises(ValidationError) as exc:
            _place()

        assert str(ring.id) in exc.value.messages["cart"][0]
        assert len(_cart().items) == 2
        assert _orders() == []


class TestPlaceOrderAtomicity:
    def test_failure_while_clearing_cart_rolls_back_order(self, filled_cart, monkeypatch):
        def broken_clear(self):
            raise RuntimeError("cart store unavailable")

        monkeypatch.setattr(ShoppingCart, "clear", broken_clear)

        with pytest.raises(RuntimeError):
            _place()

        assert _orders() == []
        assert len(_cart().items) == 2
