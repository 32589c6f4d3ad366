"""FastAPI dependency implementations."""

from fastapi import Request

from product_catalog_api.app.core.interfaces import ProductServiceInterface


def get_product_service(request: Request) -> ProductServiceInterface:
    """Get the product service attached to the application by ``create_app``."""
    return request.app.state.product_service
