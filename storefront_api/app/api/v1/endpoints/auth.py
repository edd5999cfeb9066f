"""
Mock login endpoint.

Logging in only checks that the e‑mail belongs to a seeded user.  The
returned user record is what the storefront keeps as its session; its
``email`` goes into the ``X-User-Email`` header of later requests.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from storefront_api.app.api.deps import get_catalog_service
from storefront_api.app.core.security import get_current_user
from storefront_api.app.schemas.user import LoginRequest, UserRead
from storefront_api.app.services.catalog_service import ProductCatalogService

router = APIRouter()


@router.post("/login", response_model=UserRead)
async def login(
    payload: LoginRequest,
    service: ProductCatalogService = Depends(get_catalog_service),
) -> UserRead:
    user = await service.authenticate(payload.email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return user


@router.get("/me", response_model=UserRead)
async def me(current_user: UserRead = Depends(get_current_user)) -> UserRead:
    """Return the user named by the ``X-User-Email`` header."""
    return current_user
