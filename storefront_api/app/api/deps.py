"""
Shared FastAPI dependencies.

The catalog service is created once in ``create_app`` and stored on
``app.state``; endpoints receive it through ``get_catalog_service``.
"""

from fastapi import Request

from storefront_api.app.services.catalog_service import ProductCatalogService


def get_catalog_service(request: Request) -> ProductCatalogService:
    return request.app.state.catalog_service
