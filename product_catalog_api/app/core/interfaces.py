"""Abstract capability sets for the product pipeline.

The endpoints depend on ``ProductServiceInterface`` and the service on
``ProductRepositoryInterface``, so either layer can be replaced by an
in-memory double in tests.  The production implementations live in
``services/product_service.py`` and
``repositories/product_repository.py``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from product_catalog_api.app.schemas.product import Product


class ProductRepositoryInterface(ABC):

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Return every product that has not been soft-deleted."""

    @abstractmethod
    def create(self, draft: Product) -> Product:
        """Insert ``draft`` and return the stored product with its id."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Return the live product with ``product_id`` or raise ``NotFoundError``."""

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Overwrite the stored fields of ``product`` keyed by its id."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Soft-delete the product; a missing id is not an error."""


class ProductServiceInterface(ABC):

    @abstractmethod
    def get_all_products(self) -> List[Product]:
        ...

    @abstractmethod
    def create_product(self, draft: Product) -> Product:
        ...

    @abstractmethod
    def get_product_by_id(self, product_id: int) -> Product:
        ...

    @abstractmethod
    def update_product(self, product: Product) -> Product:
        ...

    @abstractmethod
    def delete_product(self, product_id: int) -> None:
        ...
