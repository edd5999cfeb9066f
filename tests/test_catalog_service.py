import asyncio
import time

import pytest
from pydantic import ValidationError

from storefront_api.app.core.store import CatalogStore
from storefront_api.app.schemas.product import ProductDraft
from storefront_api.app.services.catalog_service import (
    ProductCatalogService,
    ProductNotFoundError,
    make_slug,
)


def names(page):
    return [p.name for p in page.data]


@pytest.mark.asyncio
async def test_authenticate_is_case_sensitive(service):
    user = await service.authenticate("seller@example.com")
    assert user is not None and user.id == "user-2"
    assert await service.authenticate("Seller@Example.com") is None
    assert await service.authenticate("nobody@example.com") is None


@pytest.mark.asyncio
async def test_price_ascending_first_page(service):
    page = await service.list_products(page=1, page_size=2, search="", sort_key="price-asc")
    assert names(page) == ["Beta", "Alpha"]
    assert page.total == 3
    assert page.total_pages == 2
    assert page.page == 1
    assert page.page_size == 2


@pytest.mark.asyncio
async def test_sort_orders(service):
    desc = await service.list_products(page_size=10, sort_key="price-desc")
    assert names(desc) == ["Gamma", "Alpha", "Beta"]
    newest = await service.list_products(page_size=10)
    assert names(newest) == ["Beta", "Alpha", "Gamma"]


@pytest.mark.asyncio
async def test_unknown_sort_key_falls_back_to_newest(service):
    page = await service.list_products(page_size=10, sort_key="rating")
    assert names(page) == ["Beta", "Alpha", "Gamma"]


@pytest.mark.asyncio
async def test_search_is_case_insensitive_substring(service):
    page = await service.list_products(search="AMM")
    assert names(page) == ["Gamma"]
    everything = await service.list_products(search="")
    assert everything.total == 3
    assert (await service.list_products(search=None)).total == 3


@pytest.mark.asyncio
async def test_search_without_match(service):
    page = await service.list_products(search="zzz")
    assert page.data == []
    assert page.total == 0
    assert page.total_pages == 0


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(service):
    page = await service.list_products(page=5, page_size=2)
    assert page.data == []
    assert page.total == 3


@pytest.mark.asyncio
async def test_invalid_page_size_and_page_are_coerced(service):
    page = await service.list_products(page=0, page_size=0)
    assert page.page == 1
    assert page.page_size == 8
    assert len(page.data) == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("page_size", [1, 3, 4, 7, 25])
async def test_pages_cover_every_match_once(seeded_store, page_size):
    service = ProductCatalogService(seeded_store, latency=0)
    first = await service.list_products(page=1, page_size=page_size, sort_key="price-asc")
    seen = []
    for page_number in range(1, first.total_pages + 1):
        page = await service.list_products(page=page_number, page_size=page_size, sort_key="price-asc")
        assert len(page.data) <= page_size
        seen.extend(p.id for p in page.data)
    assert len(seen) == first.total == 25
    assert len(set(seen)) == 25


@pytest.mark.asyncio
async def test_seeded_sort_sequences_are_monotonic(seeded_store):
    service = ProductCatalogService(seeded_store, latency=0)
    asc = (await service.list_products(page_size=25, sort_key="price-asc")).data
    desc = (await service.list_products(page_size=25, sort_key="price-desc")).data
    newest = (await service.list_products(page_size=25)).data
    assert all(a.price <= b.price for a, b in zip(asc, asc[1:]))
    assert all(a.price >= b.price for a, b in zip(desc, desc[1:]))
    assert all(a.created_at >= b.created_at for a, b in zip(newest, newest[1:]))


@pytest.mark.asyncio
async def test_ties_keep_storage_order(store):
    from .conftest import make_product

    store.products = [
        make_product("prod-x", "X", 10.0),
        make_product("prod-y", "Y", 10.0),
        make_product("prod-z", "Z", 10.0),
    ]
    service = ProductCatalogService(store, latency=0)
    page = await service.list_products(page_size=10, sort_key="price-desc")
    assert [p.id for p in page.data] == ["prod-x", "prod-y", "prod-z"]


@pytest.mark.asyncio
async def test_get_product_by_id(service):
    product = await service.get_product_by_id("prod-b")
    assert product.name == "Beta"
    assert await service.get_product_by_id("prod-missing") is None


@pytest.mark.asyncio
async def test_list_products_by_seller_includes_inactive(service, store):
    store.products[0] = store.products[0].model_copy(update={"is_active": False})
    products = await service.list_products_by_seller("user-2")
    assert [p.id for p in products] == ["prod-a", "prod-b"]
    assert await service.list_products_by_seller("user-3") == []


@pytest.mark.asyncio
async def test_create_prepends_and_assigns_identity(service, store):
    draft = ProductDraft(name="Travel  Mug Pro", price=25.0, category_id="cat-3", seller_id="user-2")
    created = await service.save_product(draft)
    assert len(store.products) == 4
    assert store.products[0] is created
    assert created.id.startswith("prod-")
    assert created.id not in {"prod-a", "prod-b", "prod-g"}
    assert created.slug.startswith("travel-mug-pro-")
    assert created.created_at == created.updated_at
    assert created.stock == 0
    by_seller = await service.list_products_by_seller("user-2")
    assert by_seller[0].id == created.id


@pytest.mark.asyncio
async def test_rapid_creates_get_unique_ids_and_slugs(service):
    draft = ProductDraft(name="Same Name", price=1.0, category_id="cat-1", seller_id="user-2")
    created = await asyncio.gather(*(service.save_product(draft) for _ in range(20)))
    assert len({p.id for p in created}) == 20
    assert len({p.slug for p in created}) == 20


@pytest.mark.asyncio
async def test_create_requires_name_and_price(service, store):
    with pytest.raises(ValidationError):
        await service.save_product(ProductDraft(price=10.0, category_id="cat-1", seller_id="user-2"))
    assert len(store.products) == 3


@pytest.mark.asyncio
async def test_create_does_not_validate_ranges(service):
    created = await service.save_product(
        ProductDraft(name="Odd", price=-5.0, stock=-1, discount_price=10.0, category_id="x", seller_id="y")
    )
    assert created.price == -5.0
    assert created.discount_price == 10.0


@pytest.mark.asyncio
async def test_update_merges_present_fields_only(service):
    before = await service.get_product_by_id("prod-a")
    updated = await service.save_product(ProductDraft(id="prod-a", price=120.0, tags=["sale"]))
    assert updated.price == 120.0
    assert updated.tags == ["sale"]
    assert updated.name == before.name
    assert updated.description == before.description
    assert updated.slug == before.slug
    assert updated.created_at == before.created_at
    assert updated.updated_at > before.updated_at

    fetched = await service.get_product_by_id("prod-a")
    assert fetched == updated


@pytest.mark.asyncio
async def test_update_can_clear_discount(service, store):
    store.products[0] = store.products[0].model_copy(update={"discount_price": 80.0})
    updated = await service.save_product(ProductDraft(id="prod-a", discount_price=None))
    assert updated.discount_price is None


@pytest.mark.asyncio
async def test_update_keeps_position(service, store):
    await service.save_product(ProductDraft(id="prod-b", name="Beta 2"))
    assert [p.id for p in store.products] == ["prod-a", "prod-b", "prod-g"]


@pytest.mark.asyncio
async def test_update_missing_id_raises(service, store):
    with pytest.raises(ProductNotFoundError) as excinfo:
        await service.save_product(ProductDraft(id="prod-missing", name="Ghost"))
    assert excinfo.value.product_id == "prod-missing"
    assert len(store.products) == 3


@pytest.mark.asyncio
async def test_delete_is_idempotent(service):
    assert await service.delete_product("prod-a") is True
    assert await service.get_product_by_id("prod-a") is None
    assert await service.delete_product("prod-a") is False
    assert (await service.list_products()).total == 2


@pytest.mark.asyncio
async def test_list_categories_returns_copy(service, store):
    categories = await service.list_categories()
    assert [c.slug for c in categories] == ["laptops", "smartphones", "accessories"]
    categories.clear()
    assert len(store.categories) == 3


@pytest.mark.asyncio
async def test_every_operation_waits_for_latency():
    service = ProductCatalogService(CatalogStore.seeded(product_count=2, seed=1), latency=0.05)
    started = time.monotonic()
    await service.get_product_by_id("prod-1")
    assert time.monotonic() - started >= 0.04


def test_make_slug_collapses_whitespace():
    assert make_slug("  Big   Red\tPhone ", "abc123") == "big-red-phone-abc123"


@pytest.mark.parametrize("field", ["name", "price", "seller_id", "images", "rating"])
def test_draft_rejects_null_for_required_fields(field):
    with pytest.raises(ValidationError):
        ProductDraft(id="prod-a", **{field: None})
    assert ProductDraft(id="prod-a", discount_price=None).changes() == {"discount_price": None}
