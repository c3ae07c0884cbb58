"""Product aggregate — a catalogue item with exact decimal pricing.

``price``, ``original_price`` and ``rating`` are stored as fixed two-place
strings; use ``unit_price()`` and friends to get ``Decimal`` values.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from storefront.catalogue.category import validate_slug
from storefront.domain import storefront
from storefront.shared.money import format_money, to_decimal

DEFAULT_VAT_RATE = 23


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255, unique=True)
    description = Text()
    price = String(required=True, max_length=20)
    original_price = String(max_length=20)
    image = String(max_length=500)
    category_id = Identifier()
    in_stock = Boolean(default=True)
    is_featured = Boolean(default=False)
    is_new = Boolean(default=False)
    rating = String(max_length=5, default="5.00")
    sku = String(max_length=50)  # Product code in the invoicing system
    diamante_id = String(max_length=100)
    vat_rate = Integer(default=DEFAULT_VAT_RATE, min_value=0, max_value=100)
    stock_quantity = Integer(min_value=0)
    created_at = DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def slug_must_be_url_safe(self):
        validate_slug(self.slug)

    @invariant.post
    def price_must_be_non_negative(self):
        if to_decimal(self.price, "price") < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

    @invariant.post
    def original_price_must_exceed_price(self):
        if not self.original_price:
            return
        if to_decimal(self.original_price, "original_price") <= to_decimal(self.price, "price"):
            raise ValidationError({"original_price": ["Original price must be higher than the current price"]})

    @invariant.post
    def rating_must_be_between_zero_and_five(self):
        if self.rating is None:
            return
        if not Decimal("0") <= to_decimal(self.rating, "rating") <= Decimal("5"):
            raise ValidationError({"rating": ["Rating must be between 0 and 5"]})

    @classmethod
    def create(cls, name, slug, price, **attributes):
        if attributes.get("original_price") is not None:
            attributes["original_price"] = format_money(attributes["original_price"])
        for defaulted in ("rating", "vat_rate", "in_stock"):
            if attributes.get(defaulted) is None:
                attributes.pop(defaulted, None)
        if "rating" in attributes:
            attributes["rating"] = format_money(attributes["rating"])

        return cls(name=name, slug=slug, price=format_money(price), **attributes)

    def reprice(self, new_price):
        self.price = format_money(new_price)

    def unit_price(self) -> Decimal:
        return to_decimal(self.price, "price")

    def effective_vat_rate(self) -> int:
        return DEFAULT_VAT_RATE if self.vat_rate is None else self.vat_rate

    def invoice_reference(self) -> str:
        return self.sku or f"PROD-{self.id}"


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_slug(self, slug: str) -> Product | None:
        return self._dao.query.filter(slug=slug).all().first

    def all_products(self) -> list[Product]:
        return self._dao.query.order_by("name").all().items

    def featured(self) -> list[Product]:
        return self._dao.query.filter(is_featured=True).order_by("name").all().items

    def new_arrivals(self) -> list[Product]:
        return self._dao.query.filter(is_new=True).order_by("name").all().items

    def in_category(self, category_id: str) -> list[Product]:
        return self._dao.query.filter(category_id=category_id).order_by("name").all().items

    def remove(self, product: Product) -> None:
        self._dao.delete(product)
