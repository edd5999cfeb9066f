"""
Pydantic schema definitions for the catalog.

Each domain (users, categories, products) defines its own models for
stored records and request bodies.  Shared pagination models live in
``pagination``.
"""
