from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from storefront_api.app.core.config import Settings
from storefront_api.app.core.fixtures import generate_fixture
from storefront_api.app.core.store import CatalogStore
from storefront_api.app.main import create_app
from storefront_api.app.schemas.product import ProductRead
from storefront_api.app.services.catalog_service import ProductCatalogService

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_product(product_id, name, price, age_days=0, seller_id="user-2", **extra):
    data = {
        "id": product_id,
        "name": name,
        "slug": name.lower().replace(" ", "-"),
        "price": price,
        "category_id": "cat-1",
        "seller_id": seller_id,
        "images": ["https://picsum.photos/seed/1/600/400"],
        "created_at": NOW - timedelta(days=age_days),
        "updated_at": NOW,
    }
    data.update(extra)
    return ProductRead(**data)


@pytest.fixture
def store():
    """Three hand-made products on top of the seeded users and categories."""
    fixture = generate_fixture(product_count=0, seed=1, now=NOW)
    products = [
        make_product("prod-a", "Alpha", 100.0, age_days=2),
        make_product("prod-b", "Beta", 50.0, age_days=1),
        make_product("prod-g", "Gamma", 200.0, age_days=3, seller_id="user-1"),
    ]
    return CatalogStore(users=fixture.users, categories=fixture.categories, products=products)


@pytest.fixture
def seeded_store():
    return CatalogStore.seeded(product_count=25, seed=42)


@pytest.fixture
def service(store):
    return ProductCatalogService(store, latency=0, default_page_size=8)


@pytest.fixture
def settings():
    return Settings(mock_latency_ms=0, log_level="WARNING")


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


SELLER = {"X-User-Email": "seller@example.com"}
ADMIN = {"X-User-Email": "admin@example.com"}
CUSTOMER = {"X-User-Email": "customer@example.com"}
