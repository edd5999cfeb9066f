"""
In‑memory storage for the catalog.

``CatalogStore`` owns the user, category and product collections and
the lock that serializes writes to the product collection.  One store
is created per application in ``create_app`` and handed to the
services that need it; there is no module level catalog state.

Products are kept newest-first: creations are inserted at index 0, so
unfiltered reads see the most recently created products before the
seeded ones.
"""

import asyncio
from typing import List, Optional

from storefront_api.app.core.fixtures import Fixture, generate_fixture
from storefront_api.app.schemas.category import CategoryRead
from storefront_api.app.schemas.product import ProductRead
from storefront_api.app.schemas.user import UserRead


class CatalogStore:
    """Container for the catalog collections."""

    def __init__(
        self,
        users: Optional[List[UserRead]] = None,
        categories: Optional[List[CategoryRead]] = None,
        products: Optional[List[ProductRead]] = None,
    ) -> None:
        self.users: List[UserRead] = list(users or [])
        self.categories: List[CategoryRead] = list(categories or [])
        self.products: List[ProductRead] = list(products or [])
        # Held for every create/update/delete of a product.
        self.write_lock = asyncio.Lock()

    @classmethod
    def from_fixture(cls, fixture: Fixture) -> "CatalogStore":
        return cls(users=fixture.users, categories=fixture.categories, products=fixture.products)

    @classmethod
    def seeded(cls, product_count: int = 25, seed: Optional[int] = None) -> "CatalogStore":
        """Create a store populated by ``generate_fixture``."""
        return cls.from_fixture(generate_fixture(product_count=product_count, seed=seed))

    def find_product_index(self, product_id: str) -> int:
        """Return the position of ``product_id`` or ``-1``."""
        for index, product in enumerate(self.products):
            if product.id == product_id:
                return index
        return -1
