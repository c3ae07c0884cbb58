import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_configure(config):
    # Logging reads the environment when the domain module is first imported
    os.environ.setdefault("ENV", "test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def _storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    from storefront.billing.gateway import reset_gateway

    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    reset_gateway()
    ctx.pop()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    """Create and persist a product. Slugs are derived from the name."""
    from protean import current_domain
    from storefront.catalogue.product import Product

    def _make(name="Anel de Ouro", price="10.00", **attributes):
        slug = attributes.pop("slug", name.lower().replace(" ", "-"))
        product = Product.create(name=name, slug=slug, price=price, **attributes)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def make_user():
    """Register a shopper through the domain and return the stored user."""
    from protean import current_domain
    from storefront.account.registration import RegisterUser
    from storefront.account.user import User

    def _make(username="ana", password="segredo123", **attributes):
        attributes.setdefault("email", f"{username}@example.pt")
        attributes.setdefault("name", username.title())
        user_id = current_domain.process(
            RegisterUser(username=username, password=password, **attributes),
            asynchronous=False,
        )
        return current_domain.repository_for(User).get(user_id)

    return _make


@pytest.fixture()
def auth_headers(make_user):
    """Register a shopper, sign them in and return ``(user, headers)``."""
    from protean import current_domain
    from storefront.account.authentication import LogIn

    def _login(username="ana", password="segredo123", **attributes):
        user = make_user(username=username, password=password, **attributes)
        token = current_domain.process(LogIn(username=username, password=password), asynchronous=False)
        return user, {"Authorization": f"Bearer {token}"}

    return _login
