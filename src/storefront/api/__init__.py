"""Storefront HTTP API package."""

from storefront.api.account import auth_router
from storefront.api.billing import billing_router
from storefront.api.cart import cart_router
from storefront.api.catalogue import category_router, product_router
from storefront.api.content import content_router
from storefront.api.errors import register_error_handlers
from storefront.api.orders import order_router

routers = [
    auth_router,
    category_router,
    product_router,
    cart_router,
    order_router,
    billing_router,
    content_router,
]

__all__ = ["routers", "register_error_handlers"]
