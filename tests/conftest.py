import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config environment and disables demo seeding so every test
    starts from an empty store.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ["STOREFRONT_SEED"] = "false"
    os.environ.pop("STRIPE_SECRET_KEY", None)


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    """Push the domain context for each test and wipe all stores afterwards."""
    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def fake_gateway(monkeypatch):
    """Every test talks to a fresh FakeGateway and starts without a webhook secret."""
    from storefront.payments.gateway import reset_gateway, set_gateway
    from storefront.payments.gateway.fake_adapter import FakeGateway

    monkeypatch.delenv("STRIPE_WEBHOOK_SECRET", raising=False)

    gateway = FakeGateway()
    set_gateway(gateway)
    yield gateway
    reset_gateway()


# ---------------------------------------------------------------------------
# Builders shared across bounded contexts
# ---------------------------------------------------------------------------
@pytest.fixture
def make_category():
    from protean import current_domain
    from storefront.catalogue.category.category import Category
    from storefront.catalogue.category.management import CreateCategory

    def _make(name="Electronics", slug=None, image_url=None):
        category_id = current_domain.process(
            CreateCategory(name=name, slug=slug, image_url=image_url),
            asynchronous=False,
        )
        return current_domain.repository_for(Category).get(category_id)

    return _make


@pytest.fixture
def make_product():
    from protean import current_domain
    from storefront.catalogue.product.management import CreateProduct
    from storefront.catalogue.product.product import Product

    def _make(name="Bluetooth Premium Headphones", price=299.90, **fields):
        product_id = current_domain.process(
            CreateProduct(name=name, price=price, **fields),
            asynchronous=False,
        )
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture
def make_user():
    from protean import current_domain
    from storefront.identity.user.registration import RegisterUser
    from storefront.identity.user.user import User

    def _make(username="jane", password="s3cret-pass", role="customer", email=None, name=None):
        user_id = current_domain.process(
            RegisterUser(
                username=username,
                email=email or f"{username}@example.com",
                password=password,
                name=name or username.title(),
                role=role,
            ),
            asynchronous=False,
        )
        return current_domain.repository_for(User).get(user_id)

    return _make


# ---------------------------------------------------------------------------
# HTTP clients
# ---------------------------------------------------------------------------
@pytest.fixture
def app():
    from storefront.web import create_app

    return create_app()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)


def _logged_in_client(app, username, password):
    from fastapi.testclient import TestClient

    client = TestClient(app)
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def customer(make_user):
    return make_user(username="jane", password="s3cret-pass")


@pytest.fixture
def admin(make_user):
    return make_user(username="admin", password="admin123", role="admin")


@pytest.fixture
def customer_client(app, customer):
    return _logged_in_client(app, "jane", "s3cret-pass")


@pytest.fixture
def admin_client(app, admin):
    return _logged_in_client(app, "admin", "admin123")
