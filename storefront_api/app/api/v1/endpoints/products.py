"""
Product endpoints for API v1.

Listing and reading products is public.  Creating, updating and
deleting require a seller or admin (see ``core.security``).  Sellers
may only touch their own products; admins may touch any product.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from storefront_api.app.api.deps import get_catalog_service
from storefront_api.app.core.security import require_roles
from storefront_api.app.schemas.pagination import PaginatedResponse, SortKey
from storefront_api.app.schemas.product import (
    ProductCreate,
    ProductDraft,
    ProductRead,
    ProductUpdate,
)
from storefront_api.app.schemas.user import Role, UserRead
from storefront_api.app.services.catalog_service import (
    ProductCatalogService,
    ProductNotFoundError,
)

router = APIRouter()
logger = logging.getLogger(__name__)

_editor = require_roles(Role.SELLER, Role.ADMIN)


def _check_owner(product: ProductRead, current_user: UserRead) -> None:
    if current_user.role != Role.ADMIN and product.seller_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Product belongs to another seller",
        )


@router.get("/", response_model=PaginatedResponse[ProductRead])
async def list_products(
    request: Request,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1),
    search: str = Query(""),
    sort_by: str = Query(SortKey.NEWEST.value, description="price-asc, price-desc or createdAt"),
    service: ProductCatalogService = Depends(get_catalog_service),
) -> PaginatedResponse[ProductRead]:
    """Return a page of products filtered by name and sorted by ``sort_by``.

    ``page_size`` defaults to the configured page size and is capped at
    ``MAX_PAGE_SIZE``.  Unknown ``sort_by`` values list newest first.
    """
    if page_size is not None:
        page_size = min(page_size, request.app.state.settings.max_page_size)
    return await service.list_products(page=page, page_size=page_size, search=search, sort_key=sort_by)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    service: ProductCatalogService = Depends(get_catalog_service),
) -> ProductRead:
    product = await service.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    current_user: UserRead = Depends(_editor),
    service: ProductCatalogService = Depends(get_catalog_service),
) -> ProductRead:
    """Create a product (seller or admin).

    Without ``seller_id`` the product is owned by the caller.  Sellers
    cannot create products for somebody else.
    """
    data = product_in.model_dump(exclude_unset=True)
    seller_id = data.get("seller_id") or current_user.id
    if current_user.role != Role.ADMIN and seller_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Sellers can only create their own products",
        )
    data["seller_id"] = seller_id
    return await service.save_product(ProductDraft(**data))


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: str,
    product_in: ProductUpdate,
    current_user: UserRead = Depends(_editor),
    service: ProductCatalogService = Depends(get_catalog_service),
) -> ProductRead:
    """Merge the provided fields onto an existing product."""
    existing = await service.get_product_by_id(product_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    _check_owner(existing, current_user)
    changes = product_in.model_dump(exclude_unset=True)
    if current_user.role != Role.ADMIN and changes.get("seller_id", current_user.id) != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Sellers cannot reassign products",
        )
    try:
        return await service.save_product(ProductDraft(id=product_id, **changes))
    except ProductNotFoundError:
        # Deleted between the ownership check and the write.
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    current_user: UserRead = Depends(_editor),
    service: ProductCatalogService = Depends(get_catalog_service),
) -> None:
    existing = await service.get_product_by_id(product_id)
    if existing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    _check_owner(existing, current_user)
    if not await service.delete_product(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    logger.info("User %s deleted product %s", current_user.email, product_id)
    return None


seller_router = APIRouter()


@seller_router.get("/{seller_id}/products", response_model=List[ProductRead])
async def list_seller_products(
    seller_id: str,
    service: ProductCatalogService = Depends(get_catalog_service),
) -> List[ProductRead]:
    """Return all of a seller's products, inactive ones included, newest creations first."""
    return await service.list_products_by_seller(seller_id)
