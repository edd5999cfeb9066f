"""
Category endpoints for API v1.  Categories are read-only.
"""

from typing import List

from fastapi import APIRouter, Depends

from storefront_api.app.api.deps import get_catalog_service
from storefront_api.app.schemas.category import CategoryRead
from storefront_api.app.services.catalog_service import ProductCatalogService

router = APIRouter()


@router.get("/", response_model=List[CategoryRead])
async def list_categories(
    service: ProductCatalogService = Depends(get_catalog_service),
) -> List[CategoryRead]:
    return await service.list_categories()
