"""Order endpoints: checkout and order history."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.api.dependencies import current_user
from storefront.api.schemas import OrderResponse, PlaceOrderRequest
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.order.view import order_detail, orders_for_customer

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(user: User = Depends(current_user)) -> list[OrderResponse]:
    return [OrderResponse.from_detail(detail) for detail in orders_for_customer(user.id)]


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, user: User = Depends(current_user)) -> OrderResponse:
    """Turn the shopper's cart into an order.

    The cart is emptied only when the order is stored. An empty cart or a
    short shipping address is rejected with 400 and changes nothing.
    """
    command = PlaceOrder(customer_id=str(user.id), **body.model_dump())
    order_id = current_domain.process(command, asynchronous=False)

    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse.from_detail(order_detail(order))
