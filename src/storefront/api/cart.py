"""Shopping cart endpoints. Every route acts on the authenticated shopper's own cart."""

from fastapi import APIRouter, Depends, Response
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.api.dependencies import current_user
from storefront.api.schemas import AddToCartRequest, CartItemResponse, CartResponse, UpdateCartQuantityRequest
from storefront.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.view import cart_line, cart_summary

cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart(user: User = Depends(current_user)) -> CartResponse:
    return CartResponse.from_summary(cart_summary(user.id))


@cart_router.post("", status_code=201, response_model=CartItemResponse)
async def add_to_cart(body: AddToCartRequest, user: User = Depends(current_user)) -> CartItemResponse:
    command = AddToCart(customer_id=str(user.id), product_id=body.product_id, quantity=body.quantity)
    item_id = current_domain.process(command, asynchronous=False)
    return CartItemResponse.from_line(cart_line(user.id, item_id))


@cart_router.put("/{item_id}", response_model=CartItemResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartQuantityRequest, user: User = Depends(current_user)
) -> CartItemResponse:
    command = UpdateCartQuantity(customer_id=str(user.id), item_id=item_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return CartItemResponse.from_line(cart_line(user.id, item_id))


@cart_router.delete("/{item_id}", status_code=204)
async def remove_cart_item(item_id: str, user: User = Depends(current_user)) -> Response:
    current_domain.process(RemoveFromCart(customer_id=str(user.id), item_id=item_id), asynchronous=False)
    return Response(status_code=204)


@cart_router.delete("", status_code=204)
async def clear_cart(user: User = Depends(current_user)) -> Response:
    current_domain.process(ClearCart(customer_id=str(user.id)), asynchronous=False)
    return Response(status_code=204)
