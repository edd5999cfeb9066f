"""
Logging configuration for the catalog API.

Catalog modules log through ``logging.getLogger(__name__)``: product
mutations at INFO, lookup misses at DEBUG.  ``setup_logging`` turns
that into console output (and optionally a log file) the first time
the application is created; later calls leave an existing setup, such
as the one installed by uvicorn or pytest, alone.
"""

import logging
import logging.config
from typing import Any, Dict, Optional

CATALOG_LOGGER = "storefront_api"


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return a ``dictConfig`` mapping for the catalog loggers.

    Unknown level names fall back to INFO.
    """
    level_name = level.upper() if isinstance(logging.getLevelName(level.upper()), int) else "INFO"
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "catalog"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "catalog",
            "filename": logfile,
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "catalog": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {"level": level_name, "handlers": list(handlers)},
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Install the catalog logging setup unless the root logger has handlers.

    Returns ``True`` when the configuration was applied.
    """
    if logging.getLogger().handlers:
        return False
    logging.config.dictConfig(build_logging_config(level, logfile))
    logging.getLogger(CATALOG_LOGGER).debug("Logging configured at %s", level)
    return True
