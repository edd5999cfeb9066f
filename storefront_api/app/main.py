"""
Main entrypoint for the Storefront API.

This module assembles the FastAPI application: it sets up logging,
seeds the in‑memory catalog, wires the catalog service into
``app.state`` and includes the versioned routers.  The module level
``app`` makes it easy to run with uvicorn or another ASGI server,
e.g.::

    uvicorn storefront_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import CatalogStore
from .services.catalog_service import ProductCatalogService


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[CatalogStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the environment based defaults.
    store : Optional[CatalogStore]
        Pre-built catalog contents.  When omitted a store is seeded from
        the fixture generator using ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = CatalogStore.seeded(
            product_count=settings.fixture_product_count,
            seed=settings.fixture_seed,
        )
    app.state.settings = settings
    app.state.catalog_service = ProductCatalogService(
        store,
        latency=settings.mock_latency_seconds,
        default_page_size=settings.default_page_size,
    )

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/")
    async def read_root() -> dict:
        return {"message": "Storefront API running"}

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "Catalog ready: %d users, %d categories, %d products (latency %d ms)",
            len(store.users),
            len(store.categories),
            len(store.products),
            settings.mock_latency_ms,
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
