"""
Error taxonomy for the product catalog.

The repository raises ``NotFoundError`` and ``StorageError``, the
service propagates them untouched and only the HTTP endpoints translate
them into status codes.  Request-side problems (``DecodeError``, the
parameter errors and ``ValidationError``) are raised by the endpoint
helpers themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from product_catalog_api.app.schemas.product import FieldError


class ProductCatalogError(Exception):
    """Base class for all product catalog errors."""


class DecodeError(ProductCatalogError):
    """The request body could not be decoded into a product payload."""


class MissingParameterError(ProductCatalogError):
    """A required path parameter was empty."""


class InvalidParameterError(ProductCatalogError):
    """A path parameter was present but not a valid identifier."""


class ValidationError(ProductCatalogError):
    """One or more product fields violate their constraints."""

    def __init__(self, errors: List["FieldError"]) -> None:
        self.errors = list(errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "\n".join(error.message for error in self.errors)


class NotFoundError(ProductCatalogError):
    """No live row matches the requested identifier."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__("Product %s not found" % product_id)


class StorageError(ProductCatalogError):
    """Any other persistence failure."""
