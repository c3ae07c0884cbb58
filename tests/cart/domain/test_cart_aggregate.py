import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.cart.cart import ShoppingCart
from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated


@pytest.fixture()
def cart():
    return ShoppingCart.create(customer_id="user-1")


class TestAddItem:
    def test_new_product_creates_line(self, cart):
        item = cart.add_item(product_id="p1", quantity=2)

        assert len(cart.items) == 1
        assert item.quantity == 2
        assert isinstance(cart._events[-1], CartItemAdded)

    @pytest.mark.parametrize("q1,q2", [(1, 1), (2, 3), (1, 10)])
    def test_same_product_merges_quantities(self, cart, q1, q2):
        first = cart.add_item(product_id="p1", quantity=q1)
        second = cart.add_item(product_id="p1", quantity=q2)

        assert len(cart.items) == 1
        assert first.id == second.id
        assert cart.items[0].quantity == q1 + q2

    def test_different_products_get_separate_lines(self, cart):
        cart.add_item(product_id="p1", quantity=1)
        cart.add_item(product_id="p2", quantity=1)
        assert len(cart.items) == 2
        assert cart.total_items() == 2

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_is_rejected(self, cart, quantity):
        with pytest.raises(ValidationError):
            cart.add_item(product_id="p1", quantity=quantity)


class TestUpdateAndRemove:
    def test_update_quantity(self, cart):
        item = cart.add_item(product_id="p1", quantity=1)

        cart.update_item_quantity(item.id, 5)

        assert cart.items[0].quantity == 5
        assert isinstance(cart._events[-1], CartQuantityUpdated)

    def test_update_to_zero_is_rejected(self, cart):
        item = cart.add_item(product_id="p1", quantity=1)
        with pytest.raises(ValidationError):
            cart.update_item_quantity(item.id, 0)

    def test_unknown_item_is_not_found(self, cart):
        with pytest.raises(ObjectNotFoundError):
            cart.update_item_quantity("missing", 2)

    def test_remove_item(self, cart):
        item = cart.add_item(product_id="p1", quantity=1)

        cart.remove_item(item.id)

        assert cart.is_empty()
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_clear(self, cart):
        cart.add_item(product_id="p1", quantity=1)
        cart.add_item(product_id="p2", quantity=3)

        cart.clear()

        assert cart.is_empty()
        assert cart._events[-1].items_removed == 2
        assert isinstance(cart._events[-1], CartCleared)
