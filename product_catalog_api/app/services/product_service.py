"""
Service layer for products.

``ProductService`` forwards each call to the repository unchanged.  It
holds no business rules of its own; it exists so that the HTTP
endpoints depend on ``ProductServiceInterface`` instead of on a
storage implementation.  Errors raised by the repository propagate as
they are.
"""

from __future__ import annotations

import logging
from typing import List

from product_catalog_api.app.core.interfaces import (
    ProductRepositoryInterface,
    ProductServiceInterface,
)
from product_catalog_api.app.schemas.product import Product

logger = logging.getLogger(__name__)


class ProductService(ProductServiceInterface):
    """Service class for managing products."""

    def __init__(self, repository: ProductRepositoryInterface) -> None:
        self._repository = repository

    def get_all_products(self) -> List[Product]:
        logger.debug("Listing products")
        return self._repository.get_all()

    def create_product(self, draft: Product) -> Product:
        logger.info("Creating product '%s'", draft.title)
        return self._repository.create(draft)

    def get_product_by_id(self, product_id: int) -> Product:
        logger.debug("Fetching product %s", product_id)
        return self._repository.get_by_id(product_id)

    def update_product(self, product: Product) -> Product:
        logger.info("Updating product %s", product.id)
        return self._repository.update(product)

    def delete_product(self, product_id: int) -> None:
        logger.info("Deleting product %s", product_id)
        self._repository.delete(product_id)
