"""
Logging configuration for the Product Catalog API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the ``product_catalog_api`` logger rather than to the root
logger, so the service's own records are formatted consistently no
matter what the host process has configured.  Every module logs
through ``logging.getLogger(__name__)`` and therefore inherits these
handlers.

The request-logging middleware in ``main`` already writes one line
per request, so uvicorn's access logger is raised to ``WARNING`` to
avoid printing each request twice.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "product_catalog_api"
QUIETED_LOGGERS = ("uvicorn.access",)
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    The level is applied on every call so a second ``create_app`` with
    different settings takes effect; handlers are only attached once.
    Unknown level names fall back to ``INFO``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIETED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if getattr(logger, "_catalog_configured", False):
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger._catalog_configured = True
    return logger
