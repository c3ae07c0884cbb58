"""Integration tests for the cart endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from storefront.api import register_error_handlers
from storefront.api.cart import cart_router
from storefront.cart.cart import ShoppingCart


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def shopper(auth_headers):
    return auth_headers()


def _add(client, headers, product, quantity=1):
    response = client.post("/cart", json={"productId": str(product.id), "quantity": quantity}, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestAuthentication:
    def test_cart_requires_login(self, client):
        assert client.get("/cart").status_code == 401
        assert client.post("/cart", json={"productId": "x", "quantity": 1}).status_code == 401


class TestAddToCartAPI:
    def test_returns_item_joined_with_product(self, client, shopper, make_product):
        _, headers = shopper
        product = make_product(price="10.00")

        item = _add(client, headers, product, 2)

        assert item["quantity"] == 2
        assert item["productId"] == str(product.id)
        assert item["product"]["price"] == "10.00"

    def test_merges_repeated_adds(self, client, shopper, make_product):
        _, headers = shopper
        product = make_product()

        first = _add(client, headers, product, 1)
        second = _add(client, headers, product, 2)

        assert first["id"] == second["id"]
        assert second["quantity"] == 3

    def test_unknown_product_returns_404(self, client, shopper):
        _, headers = shopper
        response = client.post("/cart", json={"productId": "missing", "quantity": 1}, headers=headers)
        assert response.status_code == 404

    def test_zero_quantity_returns_400(self, client, shopper, make_product):
        _, headers = shopper
        response = client.post("/cart", json={"productId": str(make_product().id), "quantity": 0}, headers=headers)
        assert response.status_code == 400


class TestGetCartAPI:
    def test_lists_items_with_totals(self, client, shopper, make_product):
        _, headers = shopper
        _add(client, headers, make_product(name="Anel", price="10.00"), 2)
        _add(client, headers, make_product(name="Colar", price="5.50"), 1)

        data = client.get("/cart", headers=headers).json()

        assert len(data["items"]) == 2
        assert data["totalItems"] == 3
        assert data["totalPrice"] == "25.50"

    def test_empty_cart(self, client, shopper):
        _, headers = shopper
        data = client.get("/cart", headers=headers).json()
        assert data == {"items": [], "totalItems": 0, "totalPrice": "0.00"}


class TestUpdateAndDeleteAPI:
    def test_update_quantity(self, client, shopper, make_product):
        _, headers = shopper
        item = _add(client, headers, make_product(), 1)

        response = client.put(f"/cart/{item['id']}", json={"quantity": 4}, headers=headers)

        assert response.status_code == 200
        assert response.json()["quantity"] == 4

    def test_update_to_zero_returns_400(self, client, shopper, make_product):
        _, headers = shopper
        item = _add(client, headers, make_product(), 1)
        assert client.put(f"/cart/{item['id']}", json={"quantity": 0}, headers=headers).status_code == 400

    def test_other_users_item_returns_404(self, client, auth_headers, make_product):
        _, ana = auth_headers(username="ana")
        _, rui = auth_headers(username="rui")
        item = _add(client, ana, make_product(), 1)

        assert client.put(f"/cart/{item['id']}", json={"quantity": 9}, headers=rui).status_code == 404
        assert client.delete(f"/cart/{item['id']}", headers=rui).status_code == 404
        assert client.get("/cart", headers=ana).json()["items"][0]["quantity"] == 1

    def test_delete_item(self, client, shopper, make_product):
        _, headers = shopper
        item = _add(client, headers, make_product(), 1)

        assert client.delete(f"/cart/{item['id']}", headers=headers).status_code == 204
        assert client.get("/cart", headers=headers).json()["items"] == []

    def test_clear_cart(self, client, shopper, make_product):
        user, headers = shopper
        _add(client, headers, make_product(name="Anel"), 1)
        _add(client, headers, make_product(name="Colar"), 1)

        assert client.delete("/cart", headers=headers).status_code == 204
        assert current_domain.repository_for(ShoppingCart).for_customer(user.id).is_empty()
