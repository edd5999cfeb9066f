"""
Mock identity and role checks.

The storefront has no passwords and no tokens.  A client that has
"logged in" (see ``POST /auth/login``) identifies itself on later
requests with the ``X-User-Email`` header, and ``get_current_user``
resolves that address through the catalog service.

``require_roles`` builds a dependency that additionally restricts a
route to the given roles, e.g. ``Depends(require_roles(Role.SELLER,
Role.ADMIN))`` for the seller dashboard.
"""

from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from storefront_api.app.api.deps import get_catalog_service
from storefront_api.app.schemas.user import Role, UserRead
from storefront_api.app.services.catalog_service import ProductCatalogService

USER_HEADER = "X-User-Email"


async def get_current_user(
    x_user_email: Optional[str] = Header(None, alias=USER_HEADER),
    service: ProductCatalogService = Depends(get_catalog_service),
) -> UserRead:
    """Dependency that resolves the calling user from ``X-User-Email``.

    Raises HTTP 401 if the header is missing, names no known user or
    names a deactivated user.
    """
    if not x_user_email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    user = await service.authenticate(x_user_email)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown user",
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User account disabled",
        )
    return user


def require_roles(*roles: Role) -> Callable[..., UserRead]:
    """Dependency factory allowing only users with one of ``roles``.

    Returns HTTP 403 for authenticated users with any other role.
    """

    def _role_dependency(current_user: UserRead = Depends(get_current_user)) -> UserRead:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency
