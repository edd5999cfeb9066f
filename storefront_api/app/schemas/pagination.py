"""
Shared pagination and sorting models.
"""

from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SortKey(str, Enum):
    """Orderings understood by the product listing.

    Any other value is treated as ``NEWEST``.
    """

    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NEWEST = "createdAt"


class PaginatedResponse(BaseModel, Generic[T]):
    """A single page of results plus the totals needed to page through them."""

    data: List[T]
    page: int
    page_size: int
    total: int
    total_pages: int
