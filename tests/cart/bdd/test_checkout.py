"""BDD tests for the cart-to-order flow."""

from decimal import Decimal

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.cart.cart import ShoppingCart
from storefront.cart.items import AddToCart
from storefront.catalogue.management import ChangeProductPrice
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder

scenarios("features/checkout.feature")

SHOPPER = "shopper-001"


@pytest.fixture()
def products():
    return {}


@pytest.fixture()
def outcome():
    """Container for the placed order id or the captured rejection."""
    return {"order_id": None, "exc": None}


def _add(product, quantity):
    current_domain.process(
        AddToCart(customer_id=SHOPPER, product_id=str(product.id), quantity=quantity),
        asynchronous=False,
    )


def _cart():
    return current_domain.repository_for(ShoppingCart).for_customer(SHOPPER)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price}'))
def a_product(make_product, products, name, price):
    products[name] = make_product(name=name, price=price)


@given(parsers.cfparse('the shopper added {quantity:d} "{name}" to the cart'))
def shopper_added(products, quantity, name):
    _add(products[name], quantity)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper adds {quantity:d} "{name}" to the cart'))
def shopper_adds(products, quantity, name):
    _add(products[name], quantity)


@when(parsers.cfparse('the shopper checks out to "{address}"'))
def shopper_checks_out(outcome, address):
    try:
        outcome["order_id"] = current_domain.process(
            PlaceOrder(customer_id=SHOPPER, shipping_address=address),
            asynchronous=False,
        )
    except ValidationError as exc:
        outcome["exc"] = exc


@when(parsers.cfparse('"{name}" is repriced to {price}'))
def product_is_repriced(products, name, price):
    current_domain.process(
        ChangeProductPrice(product_id=str(products[name].id), price=price),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_lines(count):
    assert len(_cart().items) == count


@then(parsers.cfparse('the cart holds {quantity:d} "{name}"'))
def cart_holds(products, quantity, name):
    item = _cart().item_for_product(products[name].id)
    assert item.quantity == quantity


@then("the cart is empty")
def cart_is_empty():
    assert _cart().is_empty()


@then(parsers.cfparse("an order totalling {total} is placed"))
def order_is_placed(outcome, total):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.total_amount() == Decimal(total)


@then(parsers.cfparse("the order has {count:d} items"))
def order_has_items(outcome, count):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert len(order.items) == count


@then(parsers.cfparse('the checkout is rejected because "{reason}"'))
def checkout_rejected_because(outcome, reason):
    assert outcome["exc"] is not None
    assert reason in outcome["exc"].messages["cart"]


@then("the checkout is rejected")
def checkout_rejected(outcome):
    assert outcome["exc"] is not None


@then("no order exists")
def no_order_exists():
    assert current_domain.repository_for(Order).for_customer(SHOPPER) == []
