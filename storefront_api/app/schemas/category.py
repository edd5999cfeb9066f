"""
Pydantic models for product categories.

Categories are read-only.  ``parent_category_id`` allows a category
tree, but nothing in the catalog walks it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CategoryRead(BaseModel):
    id: str = Field(..., examples=["cat-1"])
    name: str = Field(..., examples=["Laptops"])
    slug: str = Field(..., description="URL-safe identifier", examples=["laptops"])
    description: str = ""
    parent_category_id: Optional[str] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }
