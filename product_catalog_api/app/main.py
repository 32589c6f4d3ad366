"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application: it sets up logging,
wires the repository, service and routers together, and attaches the
cross‑cutting middleware (CORS, request logging and error recovery).
``create_app`` takes an explicit ``Settings`` value instead of reading
the environment, so tests can build as many independent apps as they
need.  To serve the application use ``run.py`` or uvicorn's factory
mode::

    uvicorn product_catalog_api.app.main:create_app_from_env --factory

The application title and version are provided via ``Settings``.
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.db import get_database_path, init_db
from .core.interfaces import ProductServiceInterface
from .core.logging_config import setup_logging
from .repositories import SQLiteProductRepository
from .services.product_service import ProductService

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
ALLOWED_METHODS = ["GET", "PUT", "POST", "DELETE"]
ALLOWED_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization", "Content-Length"]


def create_app(
    settings: Settings, service: Optional[ProductServiceInterface] = None
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Settings
        Process configuration, usually from ``Settings.from_env``.
    service : Optional[ProductServiceInterface]
        Pre-built product service.  When omitted the SQLite repository
        and ``ProductService`` are constructed from ``settings`` and the
        schema migrations run at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    database_path: Optional[str] = None
    if service is None:
        database_path = get_database_path(settings.database_url)
        service = ProductService(SQLiteProductRepository(database_path))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database_path is not None:
            version = init_db(database_path)
            logger.info("Database %s ready at schema version %s", database_path, version)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.product_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "%s %s failed after %.1fms [request_id=%s]",
                request.method,
                request.url.path,
                duration_ms,
                request_id,
            )
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error"},
                headers={"X-Request-ID": request_id},
            )
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1fms) [request_id=%s]",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    app.include_router(v1_router, prefix=API_PREFIX)

    return app


def create_app_from_env() -> FastAPI:
    """Factory for ``uvicorn --factory``; reads settings from the environment."""
    return create_app(Settings.from_env())
