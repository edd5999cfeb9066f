"""
Application package initializer.

The catalog backend is split into a configuration/core layer, Pydantic
schemas, a service layer holding the catalog logic and versioned HTTP
routers under ``api/<version>/``.
"""

from .main import app  # noqa: F401
