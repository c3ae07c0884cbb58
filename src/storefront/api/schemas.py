"""Pydantic request/response schemas for the storefront API.

These are external contracts (anti-corruption layer), separate from the
internal Protean commands and aggregates. Field names travel as camelCase on
the wire; money travels as two-place decimal strings.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
class RegisterRequest(CamelModel):
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=128)
    email: str = Field(max_length=254)
    name: str = Field(min_length=1, max_length=150)
    address: str | None = None
    phone: str | None = None
    vat_number: str | None = None
    is_company: bool = False
    company_name: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "username": "ana",
                    "password": "s3cret!",
                    "email": "ana@example.pt",
                    "name": "Ana Matos",
                    "address": "Rua Augusta 10, 1100-053, Lisboa",
                    "vatNumber": "123456789",
                }
            ]
        },
    )


class LoginRequest(CamelModel):
    username: str
    password: str


class UpdateProfileRequest(CamelModel):
    name: str | None = Field(default=None, max_length=150)
    email: str | None = Field(default=None, max_length=254)
    address: str | None = None
    phone: str | None = None
    vat_number: str | None = None
    is_company: bool | None = None
    company_name: str | None = None


class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    name: str
    address: str | None = None
    phone: str | None = None
    vat_number: str | None = None
    is_company: bool = False
    company_name: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            name=user.name,
            address=user.address,
            phone=user.phone,
            vat_number=user.vat_number,
            is_company=bool(user.is_company),
            company_name=user.company_name,
            created_at=user.created_at,
        )


class AuthResponse(CamelModel):
    user: UserResponse
    token: str


# ---------------------------------------------------------------------------
# Catalogue and content
# ---------------------------------------------------------------------------
class CategoryResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    image: str | None = None

    @classmethod
    def from_category(cls, category) -> "CategoryResponse":
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug,
            description=category.description,
            image=category.image,
        )


class ProductResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    price: str
    original_price: str | None = None
    image: str | None = None
    category_id: str | None = None
    in_stock: bool = True
    is_featured: bool = False
    is_new: bool = False
    rating: str | None = None
    sku: str | None = None
    diamante_id: str | None = None
    vat_rate: int | None = None
    stock_quantity: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            original_price=product.original_price,
            image=product.image,
            category_id=str(product.category_id) if product.category_id else None,
            in_stock=bool(product.in_stock),
            is_featured=bool(product.is_featured),
            is_new=bool(product.is_new),
            rating=product.rating,
            sku=product.sku,
            diamante_id=product.diamante_id,
            vat_rate=product.vat_rate,
            stock_quantity=product.stock_quantity,
            created_at=product.created_at,
        )


class TestimonialResponse(CamelModel):
    id: str
    name: str
    initials: str | None = None
    customer_since: str | None = None
    content: str
    rating: int

    @classmethod
    def from_testimonial(cls, testimonial) -> "TestimonialResponse":
        return cls(
            id=str(testimonial.id),
            name=testimonial.name,
            initials=testimonial.initials,
            customer_since=testimonial.customer_since,
            content=testimonial.content,
            rating=testimonial.rating,
        )


class ContactRequest(CamelModel):
    name: str = Field(min_length=1, max_length=150)
    email: str = Field(min_length=3, max_length=254)
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1)


class ContactMessageResponse(CamelModel):
    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime | None = None

    @classmethod
    def from_message(cls, contact) -> "ContactMessageResponse":
        return cls(
            id=str(contact.id),
            name=contact.name,
            email=contact.email,
            subject=contact.subject,
            message=contact.message,
            created_at=contact.created_at,
        )


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class UpdateCartQuantityRequest(CamelModel):
    quantity: int = Field(ge=1)


class CartItemResponse(CamelModel):
    id: str
    product_id: str
    quantity: int
    added_at: datetime | None = None
    product: ProductResponse | None = None

    @classmethod
    def from_line(cls, line) -> "CartItemResponse":
        return cls(
            id=str(line.item.id),
            product_id=str(line.item.product_id),
            quantity=line.item.quantity,
            added_at=line.item.added_at,
            product=ProductResponse.from_product(line.product) if line.product else None,
        )


class CartResponse(CamelModel):
    items: list[CartItemResponse]
    total_items: int
    total_price: str

    @classmethod
    def from_summary(cls, summary) -> "CartResponse":
        return cls(
            items=[CartItemResponse.from_line(line) for line in summary.lines],
            total_items=summary.total_items,
            total_price=f"{summary.total_price:.2f}",
        )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(CamelModel):
    shipping_address: str = Field(min_length=5)
    phone_number: str | None = None
    payment_method: str | None = None
    vat_number: str | None = None
    notes: str | None = None


class OrderItemResponse(CamelModel):
    id: str
    product_id: str
    quantity: int
    price: str
    created_at: datetime | None = None
    product: ProductResponse | None = None

    @classmethod
    def from_line(cls, line) -> "OrderItemResponse":
        return cls(
            id=str(line.item.id),
            product_id=str(line.item.product_id),
            quantity=line.item.quantity,
            price=line.item.price,
            created_at=line.item.created_at,
            product=ProductResponse.from_product(line.product) if line.product else None,
        )


class OrderResponse(CamelModel):
    id: str
    customer_id: str
    status: str
    total: str
    shipping_address: str
    phone_number: str | None = None
    payment_method: str | None = None
    vat_number: str | None = None
    notes: str | None = None
    diamante_invoice_id: str | None = None
    diamante_invoice_url: str | None = None
    created_at: datetime | None = None
    items: list[OrderItemResponse]

    @classmethod
    def from_detail(cls, detail) -> "OrderResponse":
        order = detail.order
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            status=order.status,
            total=order.total,
            shipping_address=order.shipping_address,
            phone_number=order.phone_number,
            payment_method=order.payment_method,
            vat_number=order.vat_number,
            notes=order.notes,
            diamante_invoice_id=order.diamante_invoice_id,
            diamante_invoice_url=order.diamante_invoice_url,
            created_at=order.created_at,
            items=[OrderItemResponse.from_line(line) for line in detail.lines],
        )


# ---------------------------------------------------------------------------
# Billing
# ---------------------------------------------------------------------------
class BillingStatusResponse(CamelModel):
    success: bool
    message: str


class InvoiceResponse(CamelModel):
    success: bool
    message: str
    invoice_number: str | None = None
    invoice_url: str | None = None
    error: str | None = None
