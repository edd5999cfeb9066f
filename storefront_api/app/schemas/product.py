"""
Pydantic models for product data.

``ProductBase`` holds the fields a seller may edit; ``ProductRead``
adds the identity and bookkeeping fields assigned by the catalog.
``ProductDraft`` is the upsert payload understood by
``ProductCatalogService.save_product``: every field is optional and
only the fields that were explicitly set take part in a merge.

Prices, stock and ratings are typed but not range checked here.  The
catalog stores what it is given; ``discount_price`` is not compared
with ``price``.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

# Fields every stored product must carry a value for.  Drafts and
# update bodies may omit them, but may not set them to null.
_NON_NULLABLE = (
    "name",
    "description",
    "price",
    "stock",
    "sku",
    "category_id",
    "seller_id",
    "images",
    "specifications",
    "tags",
    "rating",
    "is_active",
)


class ProductBase(BaseModel):
    name: str = Field(..., examples=["Laptop Model 1"])
    description: str = ""
    price: float = Field(..., description="Regular price", examples=[999.99])
    discount_price: Optional[float] = Field(None, description="Reduced price shown instead of price")
    stock: int = 0
    sku: str = ""
    category_id: str = Field(..., examples=["cat-1"])
    seller_id: str = Field(..., examples=["user-2"])
    images: List[str] = Field(default_factory=list)
    specifications: Dict[str, str] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    rating: float = 0.0
    is_active: bool = True


class ProductRead(ProductBase):
    """Schema for reading a stored product."""

    id: str = Field(..., examples=["prod-1"])
    slug: str = Field(..., examples=["laptops-model-1"])
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class ProductDraft(BaseModel):
    """Upsert payload for ``save_product``.

    Without ``id`` the draft creates a product; with ``id`` it is merged
    onto the existing record.  ``slug`` and the timestamps are managed
    by the catalog and cannot be supplied.
    Fields may be left out but only ``discount_price`` may be set to
    ``None`` (which clears the discount).
    """

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    discount_price: Optional[float] = None
    stock: Optional[int] = None
    sku: Optional[str] = None
    category_id: Optional[str] = None
    seller_id: Optional[str] = None
    images: Optional[List[str]] = None
    specifications: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    rating: Optional[float] = None
    is_active: Optional[bool] = None

    @field_validator(*_NON_NULLABLE)
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> dict:
        """Return the explicitly set fields, without ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class ProductCreate(BaseModel):
    """Request body for creating a product.

    ``seller_id`` defaults to the calling user when omitted.
    """

    name: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., ge=0)
    discount_price: Optional[float] = Field(None, ge=0)
    stock: int = Field(0, ge=0)
    sku: str = ""
    category_id: str
    seller_id: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    specifications: Dict[str, str] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    is_active: bool = True


class ProductUpdate(BaseModel):
    """Request body for updating a product.

    All fields are optional; only provided values are changed.  An
    explicit ``null`` is accepted for ``discount_price`` only.
    """

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    discount_price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    sku: Optional[str] = None
    category_id: Optional[str] = None
    seller_id: Optional[str] = None
    images: Optional[List[str]] = None
    specifications: Optional[Dict[str, str]] = None
    tags: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator(*(f for f in _NON_NULLABLE if f != "rating"))
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value
