"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import auth, categories, dashboard, products

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(products.router, prefix="/products", tags=["products"])
# Seller listings live on the products module but under their own prefix.
router.include_router(products.seller_router, prefix="/sellers", tags=["products"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
