"""Read-only catalogue endpoints."""

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.api.schemas import CategoryResponse, ProductResponse
from storefront.catalogue.category import Category
from storefront.catalogue.product import Product

category_router = APIRouter(prefix="/categories", tags=["categories"])
product_router = APIRouter(prefix="/products", tags=["products"])


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).all_categories()
    return [CategoryResponse.from_category(category) for category in categories]


@category_router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str) -> CategoryResponse:
    category = current_domain.repository_for(Category).find_by_slug(slug)
    if category is None:
        raise ObjectNotFoundError(f"Category {slug} not found")
    return CategoryResponse.from_category(category)


@category_router.get("/{category_id}/products", response_model=list[ProductResponse])
async def list_category_products(category_id: str) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).in_category(category_id)
    return [ProductResponse.from_product(product) for product in products]


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).all_products()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/featured", response_model=list[ProductResponse])
async def list_featured_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).featured()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/new", response_model=list[ProductResponse])
async def list_new_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).new_arrivals()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/{slug}", response_model=ProductResponse)
async def get_product(slug: str) -> ProductResponse:
    product = current_domain.repository_for(Product).find_by_slug(slug)
    if product is None:
        raise ObjectNotFoundError(f"Product {slug} not found")
    return ProductResponse.from_product(product)
