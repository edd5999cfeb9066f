"""
Seller/admin dashboard endpoint.

Admins see the first ``DASHBOARD_LIMIT`` products of the full catalog,
newest first.  Sellers see every product they own.
"""

from typing import List

from fastapi import APIRouter, Depends

from storefront_api.app.api.deps import get_catalog_service
from storefront_api.app.core.security import require_roles
from storefront_api.app.schemas.pagination import SortKey
from storefront_api.app.schemas.product import ProductRead
from storefront_api.app.schemas.user import Role, UserRead
from storefront_api.app.services.catalog_service import ProductCatalogService

router = APIRouter()

DASHBOARD_LIMIT = 100


@router.get("/products", response_model=List[ProductRead])
async def dashboard_products(
    current_user: UserRead = Depends(require_roles(Role.SELLER, Role.ADMIN)),
    service: ProductCatalogService = Depends(get_catalog_service),
) -> List[ProductRead]:
    if current_user.role == Role.ADMIN:
        page = await service.list_products(page=1, page_size=DASHBOARD_LIMIT, sort_key=SortKey.NEWEST.value)
        return page.data
    return await service.list_products_by_seller(current_user.id)
