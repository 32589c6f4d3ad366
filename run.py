"""Entry point for the Product Catalog API.

This script reads configuration from the environment, builds the
FastAPI application and serves it with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Required variables are ``DATABASE_URL`` and ``PORT``; see
``product_catalog_api/app/core/config.py`` for the optional ones.

Usage:
    DATABASE_URL=products.db PORT=8080 python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from product_catalog_api.app.core.config import ConfigurationError, Settings
from product_catalog_api.app.main import create_app

logger = logging.getLogger("product_catalog_api")


async def serve(settings: Settings) -> None:
    """Serve the application on ``settings.host:settings.port``."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # requests are logged by the application middleware
        access_log=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()
    # serve() returns without raising if startup was aborted
    if not server.started:
        raise SystemExit("Failed to start the server on %s:%s" % (settings.host, settings.port))


def main() -> int:
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.critical("Invalid configuration: %s", exc)
        return 1
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
