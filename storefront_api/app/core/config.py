"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
catalog starts with no configuration at all; override them via
environment variables or pass a custom ``Settings`` instance to
``create_app``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Storefront API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Artificial delay applied to every catalog operation, in
    # milliseconds.  Lets storefront clients exercise loading states.
    mock_latency_ms: int = int(os.getenv("MOCK_LATENCY_MS", "500"))

    # Page size used when a caller passes no page size or a
    # non‑positive one, and the upper bound accepted over HTTP.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "8"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

    # Size of the generated product fixture.  When ``FIXTURE_SEED`` is
    # set the fixture is reproducible across restarts.
    fixture_product_count: int = int(os.getenv("FIXTURE_PRODUCT_COUNT", "25"))
    fixture_seed: Optional[int] = _optional_int("FIXTURE_SEED")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    @property
    def mock_latency_seconds(self) -> float:
        return max(self.mock_latency_ms, 0) / 1000.0


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at import time, environment variables should be set
# before importing this module.
settings = Settings()
