"""
Service layer for the product catalog.

``ProductCatalogService`` answers catalog queries and applies product
mutations against an injected ``CatalogStore``.  Every public method
waits for the configured latency before touching the store, so callers
must treat all operations as asynchronous even though the data lives
in memory.

Lookups that miss return ``None`` (or ``False`` for deletes) rather
than raising.  The one exception is updating a product that does not
exist, which raises ``ProductNotFoundError`` instead of silently doing
nothing.

Product mutations run under the store's write lock.  Reads do not take
the lock; they see the collection as it was at the moment they ran.
"""

from __future__ import annotations

import asyncio
import logging
import math
import re
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from storefront_api.app.core.store import CatalogStore
from storefront_api.app.schemas.category import CategoryRead
from storefront_api.app.schemas.pagination import PaginatedResponse, SortKey
from storefront_api.app.schemas.product import ProductDraft, ProductRead
from storefront_api.app.schemas.user import UserRead

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class ProductNotFoundError(ValueError):
    """Raised when an update targets a product id that is not stored."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def make_slug(name: str, suffix: str) -> str:
    """Build a product slug from ``name`` and a unique ``suffix``.

    The name is stripped of surrounding whitespace and lower-cased, and
    each inner whitespace run becomes a single ``-``, so
    ``"  Big Red  Phone "`` gives ``"big-red-phone-<suffix>"``.
    """
    base = _WHITESPACE.sub("-", name.strip().lower())
    return f"{base}-{suffix}"


class ProductCatalogService:
    """Queries and mutations over the in‑memory catalog."""

    def __init__(
        self,
        store: CatalogStore,
        latency: float = 0.5,
        default_page_size: int = 8,
    ) -> None:
        self.store = store
        self.latency = latency
        self.default_page_size = default_page_size

    async def _simulate_latency(self) -> None:
        await asyncio.sleep(self.latency)

    # ------------------------------------------------------------------
    # Users and categories
    # ------------------------------------------------------------------

    async def authenticate(self, email: str) -> Optional[UserRead]:
        """Return the user whose e‑mail matches exactly, or ``None``.

        The comparison is case-sensitive and no credential is checked.
        """
        await self._simulate_latency()
        for user in self.store.users:
            if user.email == email:
                return user
        logger.debug("No user with email %s", email)
        return None

    async def list_categories(self) -> List[CategoryRead]:
        await self._simulate_latency()
        return list(self.store.categories)

    # ------------------------------------------------------------------
    # Product queries
    # ------------------------------------------------------------------

    async def list_products(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        search: Optional[str] = "",
        sort_key: Optional[str] = SortKey.NEWEST.value,
    ) -> PaginatedResponse[ProductRead]:
        """Return one page of products matching ``search``.

        - ``search`` is matched case-insensitively as a substring of the
          product name; an empty value matches every product.
        - ``sort_key`` is ``price-asc``, ``price-desc`` or ``createdAt``
          (newest first).  Unknown keys fall back to ``createdAt``.
          Products that tie on the sort key keep their storage order.
        - ``page`` is 1-indexed; values below 1 are treated as 1.  Pages
          past the last one return no data.
        - ``page_size`` values that are missing or not positive fall
          back to the default page size.
        """
        await self._simulate_latency()
        if page_size is None or page_size <= 0:
            page_size = self.default_page_size
        page = max(page, 1)

        needle = (search or "").lower()
        matches = [p for p in self.store.products if needle in p.name.lower()]
        matches = self._sort_products(matches, sort_key)

        total = len(matches)
        total_pages = math.ceil(total / page_size)
        start = (page - 1) * page_size
        return PaginatedResponse[ProductRead](
            data=matches[start:start + page_size],
            page=page,
            page_size=page_size,
            total=total,
            total_pages=total_pages,
        )

    @staticmethod
    def _sort_products(products: List[ProductRead], sort_key: Optional[str]) -> List[ProductRead]:
        if sort_key == SortKey.PRICE_ASC.value:
            return sorted(products, key=lambda p: p.price)
        if sort_key == SortKey.PRICE_DESC.value:
            return sorted(products, key=lambda p: p.price, reverse=True)
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    async def get_product_by_id(self, product_id: str) -> Optional[ProductRead]:
        await self._simulate_latency()
        index = self.store.find_product_index(product_id)
        if index == -1:
            logger.debug("Product %s not found", product_id)
            return None
        return self.store.products[index]

    async def list_products_by_seller(self, seller_id: str) -> List[ProductRead]:
        """Return every product owned by ``seller_id``, active or not, in storage order."""
        await self._simulate_latency()
        return [p for p in self.store.products if p.seller_id == seller_id]

    # ------------------------------------------------------------------
    # Product mutations
    # ------------------------------------------------------------------

    async def save_product(self, draft: ProductDraft) -> ProductRead:
        """Create or update a product.

        With ``draft.id`` set, the explicitly set fields of the draft
        overwrite the stored record and ``updated_at`` is refreshed;
        ``slug`` and ``created_at`` are kept.  Raises
        ``ProductNotFoundError`` if no product has that id.

        Without an id, a new product is created with a fresh id and a
        slug derived from its name, and is placed at the front of the
        collection.

        Drafts cannot carry ``None`` for a field a product requires (see
        ``ProductDraft``); a create draft that leaves out ``name``,
        ``price``, ``category_id`` or ``seller_id`` raises pydantic's
        ``ValidationError`` and the store is left unchanged.
        """
        await self._simulate_latency()
        async with self.store.write_lock:
            if draft.id is not None:
                return self._update_product(draft.id, draft)
            return self._create_product(draft)

    def _update_product(self, product_id: str, draft: ProductDraft) -> ProductRead:
        index = self.store.find_product_index(product_id)
        if index == -1:
            raise ProductNotFoundError(product_id)
        current = self.store.products[index]
        changes = draft.changes()
        updated = ProductRead.model_validate(
            {**current.model_dump(), **changes, "updated_at": _utcnow()}
        )
        self.store.products[index] = updated
        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def _create_product(self, draft: ProductDraft) -> ProductRead:
        token = uuid.uuid4().hex
        now = _utcnow()
        changes = draft.changes()
        product = ProductRead.model_validate(
            {
                **changes,
                "id": f"prod-{token}",
                "slug": make_slug(changes.get("name") or "", token[:8]),
                "created_at": now,
                "updated_at": now,
            }
        )
        self.store.products.insert(0, product)
        logger.info("Created product %s for seller %s", product.id, product.seller_id)
        return product

    async def delete_product(self, product_id: str) -> bool:
        """Remove a product.  Returns ``True`` only if something was removed."""
        await self._simulate_latency()
        async with self.store.write_lock:
            before = len(self.store.products)
            self.store.products = [p for p in self.store.products if p.id != product_id]
            removed = len(self.store.products) < before
        if removed:
            logger.info("Deleted product %s", product_id)
        else:
            logger.debug("Delete skipped, product %s not found", product_id)
        return removed
