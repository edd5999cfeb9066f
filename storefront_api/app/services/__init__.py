"""
Service layer abstraction.

Services encapsulate the catalog logic.  They operate on an injected
``CatalogStore`` so that the in‑memory collections used here can be
swapped for real storage without changing API handlers.
"""
