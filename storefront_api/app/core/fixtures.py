"""
Fixture generator for the in‑memory catalog.

``generate_fixture`` produces the users, categories and products the
catalog starts with.  Three users cover the three roles, three
categories cover the product range, and products are spread over the
categories round‑robin.  All products belong to the seed seller.

Random values (prices, stock, SKUs, ratings, creation times) come from
a private ``random.Random`` so that passing ``seed`` gives an identical
fixture on every run.
"""

import random
import string
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from storefront_api.app.schemas.category import CategoryRead
from storefront_api.app.schemas.product import ProductRead
from storefront_api.app.schemas.user import Role, UserRead

SEED_SELLER_ID = "user-2"

_USERS = [
    ("user-1", "Admin", "User", "admin@example.com", Role.ADMIN),
    ("user-2", "Seller", "User", "seller@example.com", Role.SELLER),
    ("user-3", "Customer", "User", "customer@example.com", Role.CUSTOMER),
]

_CATEGORIES = [
    ("cat-1", "Laptops", "laptops", "Powerful and portable computers."),
    ("cat-2", "Smartphones", "smartphones", "Stay connected on the go."),
    ("cat-3", "Accessories", "accessories", "Enhance your devices."),
]

_DESCRIPTION = (
    "A high-performance device with a stunning display and all-day battery life. "
    "Perfect for work and play. Features the latest processor, ample storage, "
    "and a sleek, durable design."
)

_SPECIFICATIONS = {"Processor": "Next-Gen", "RAM": "16GB", "Storage": "512GB SSD"}


@dataclass
class Fixture:
    users: List[UserRead] = field(default_factory=list)
    categories: List[CategoryRead] = field(default_factory=list)
    products: List[ProductRead] = field(default_factory=list)


def _random_sku(rng: random.Random) -> str:
    return "SKU-" + "".join(rng.choices(string.ascii_uppercase + string.digits, k=8))


def generate_fixture(
    product_count: int = 25,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Fixture:
    """Build the initial catalog contents.

    Parameters
    ----------
    product_count : int
        Number of products to generate.
    seed : Optional[int]
        Seed for the random values.  ``None`` gives a different
        fixture on every call.
    now : Optional[datetime]
        Reference time for timestamps; defaults to the current UTC time.
    """
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)

    users = [
        UserRead(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        for user_id, first_name, last_name, email, role in _USERS
    ]

    categories = [
        CategoryRead(
            id=category_id,
            name=name,
            slug=slug,
            description=description,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        for category_id, name, slug, description in _CATEGORIES
    ]

    products: List[ProductRead] = []
    for i in range(product_count):
        category = categories[i % len(categories)]
        number = i + 1
        price = round(rng.uniform(200, 1500), 2)
        products.append(
            ProductRead(
                id=f"prod-{number}",
                # "Laptops" -> "Laptop Model 1"
                name=f"{category.name[:-1]} Model {number}",
                slug=f"{category.slug}-model-{number}",
                description=_DESCRIPTION,
                price=price,
                discount_price=round(price * 0.85, 2) if i % 3 == 0 else None,
                stock=rng.randrange(100),
                sku=_random_sku(rng),
                category_id=category.id,
                seller_id=SEED_SELLER_ID,
                images=[f"https://picsum.photos/seed/{number}/600/400"],
                specifications=dict(_SPECIFICATIONS),
                tags=[category.name.lower(), "new-arrival"],
                rating=round(rng.uniform(3.5, 5.0), 1),
                is_active=True,
                created_at=now - timedelta(seconds=rng.uniform(0, 30 * 24 * 60 * 60)),
                updated_at=now,
            )
        )

    return Fixture(users=users, categories=categories, products=products)
