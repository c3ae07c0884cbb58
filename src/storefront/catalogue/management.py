"""Catalogue management — commands and handlers used by seeding and back-office tooling."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=120)
    description = Text()
    image = String(max_length=500)


@storefront.command(part_of="Product")
class CreateProduct:
    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255)
    description = Text()
    price = String(required=True, max_length=20)
    original_price = String(max_length=20)
    image = String(max_length=500)
    category_id = Identifier()
    in_stock = Boolean()
    is_featured = Boolean(default=False)
    is_new = Boolean(default=False)
    rating = String(max_length=5)
    sku = String(max_length=50)
    diamante_id = String(max_length=100)
    vat_rate = Integer(min_value=0, max_value=100)
    stock_quantity = Integer(min_value=0)


@storefront.command(part_of="Product")
class ChangeProductPrice:
    """Reprice a product. Carts pick the new price up; placed orders keep theirs."""

    product_id = Identifier(required=True)
    price = String(required=True, max_length=20)


@storefront.command_handler(part_of=Category)
class ManageCategoriesHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo.find_by_slug(command.slug):
            raise ValidationError({"slug": [f"Category slug '{command.slug}' is already taken"]})

        category = Category(
            name=command.name,
            slug=command.slug,
            description=command.description,
            image=command.image,
        )
        repo.add(category)
        return str(category.id)


@storefront.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)
        if repo.find_by_slug(command.slug):
            raise ValidationError({"slug": [f"Product slug '{command.slug}' is already taken"]})

        if command.category_id:
            try:
                current_domain.repository_for(Category).get(command.category_id)
            except ObjectNotFoundError:
                raise ValidationError({"category_id": ["Unknown category"]}) from None

        product = Product.create(
            name=command.name,
            slug=command.slug,
            price=command.price,
            description=command.description,
            original_price=command.original_price,
            image=command.image,
            category_id=command.category_id,
            in_stock=command.in_stock,
            is_featured=command.is_featured,
            is_new=command.is_new,
            rating=command.rating,
            sku=command.sku,
            diamante_id=command.diamante_id,
            vat_rate=command.vat_rate,
            stock_quantity=command.stock_quantity,
        )
        repo.add(product)
        return str(product.id)

    @handle(ChangeProductPrice)
    def change_price(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.reprice(command.price)
        repo.add(product)
