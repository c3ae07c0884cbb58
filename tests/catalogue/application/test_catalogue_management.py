import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.category import Category
from storefront.catalogue.management import ChangeProductPrice, CreateCategory, CreateProduct
from storefront.catalogue.product import Product


def _create_category(slug="aneis", name="Anéis"):
    return current_domain.process(CreateCategory(name=name, slug=slug), asynchronous=False)


class TestCreateCategory:
    def test_creates_category(self):
        category_id = _create_category()
        category = current_domain.repository_for(Category).get(category_id)
        assert category.name == "Anéis"

    def test_duplicate_slug_is_rejected(self):
        _create_category()
        with pytest.raises(ValidationError):
            _create_category(name="Outros anéis")


class TestCreateProduct:
    def test_creates_product_in_category(self):
        category_id = _create_category()
        product_id = current_domain.process(
            CreateProduct(name="Anel", slug="anel", price="1299.99", category_id=category_id, rating="4.5"),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert product.category_id == category_id
        assert product.rating == "4.50"
        assert product.in_stock is True

    def test_unknown_category_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                CreateProduct(name="Anel", slug="anel", price="10.00", category_id="missing"),
                asynchronous=False,
            )
        assert "category_id" in exc.value.messages

    def test_duplicate_slug_is_rejected(self):
        current_domain.process(CreateProduct(name="Anel", slug="anel", price="10.00"), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(CreateProduct(name="Anel 2", slug="anel", price="12.00"), asynchronous=False)


class TestChangeProductPrice:
    def test_reprices(self, make_product):
        product = make_product(price="10.00")

        current_domain.process(ChangeProductPrice(product_id=str(product.id), price="12.50"), asynchronous=False)

        assert current_domain.repository_for(Product).get(product.id).price == "12.50"

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(ChangeProductPrice(product_id="missing", price="1.00"), asynchronous=False)


class TestProductQueries:
    def test_featured_and_new(self, make_product):
        make_product(name="Colar", is_featured=True)
        make_product(name="Pulseira", is_new=True)
        make_product(name="Relogio")

        repo = current_domain.repository_for(Product)
        assert [p.slug for p in repo.featured()] == ["colar"]
        assert [p.slug for p in repo.new_arrivals()] == ["pulseira"]
        assert len(repo.all_products()) == 3

    def test_in_category(self, make_product):
        category_id = _create_category()
        make_product(name="Anel", category_id=category_id)
        make_product(name="Colar")

        products = current_domain.repository_for(Product).in_category(category_id)
        assert [p.slug for p in products] == ["anel"]
