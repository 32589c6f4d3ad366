"""
Product endpoints for API v1.

These routes expose CRUD over the product catalog.  This module is the
only place where catalog errors are turned into HTTP statuses: the
service and repository raise ``NotFoundError``/``StorageError`` and
the helpers below raise the request-side errors.  Every failure is
reported with a fixed ``detail`` per category; only validation
failures carry field-level text.

Updates are partial: the stored product is loaded first and only the
non-empty, non-zero fields of the request body are overlaid on it.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError as PydanticValidationError

from product_catalog_api.app.api.deps import get_product_service
from product_catalog_api.app.core.errors import (
    DecodeError,
    InvalidParameterError,
    MissingParameterError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from product_catalog_api.app.core.interfaces import ProductServiceInterface
from product_catalog_api.app.schemas.product import Product, ProductPayload, validate_product

router = APIRouter()

MISSING_ID = "Missing product ID"
INVALID_ID = "Invalid product ID"
DECODE_FAILED = "Failed to decode product data"
NOT_FOUND = "Product not found"
UNPROCESSABLE = 422
# SQLite INTEGER PRIMARY KEY is a signed 64-bit value
MAX_PRODUCT_ID = 2 ** 63 - 1


def parse_product_id(raw: Optional[str]) -> int:
    """Turn the ``id`` path segment into a positive integer."""
    if raw is None or not raw.strip():
        raise MissingParameterError(MISSING_ID)
    try:
        product_id = int(raw)
    except ValueError as exc:
        raise InvalidParameterError(INVALID_ID) from exc
    if product_id <= 0 or product_id > MAX_PRODUCT_ID:
        raise InvalidParameterError(INVALID_ID)
    return product_id


def decode_payload(body: bytes) -> ProductPayload:
    """Decode a raw JSON request body into a ``ProductPayload``."""
    try:
        return ProductPayload.model_validate_json(body)
    except PydanticValidationError as exc:
        raise DecodeError(DECODE_FAILED) from exc


def ensure_valid(product: Product) -> None:
    errors = validate_product(product)
    if errors:
        raise ValidationError(errors)


async def product_payload(request: Request) -> ProductPayload:
    try:
        return decode_payload(await request.body())
    except DecodeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DECODE_FAILED) from exc


def product_id_param(product_id: str) -> int:
    try:
        return parse_product_id(product_id)
    except (MissingParameterError, InvalidParameterError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("", response_model=List[Product])
def list_products(
    service: ProductServiceInterface = Depends(get_product_service),
) -> List[Product]:
    """Return every product that has not been deleted."""
    try:
        return service.get_all_products()
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list the products",
        ) from exc


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductPayload = Depends(product_payload),
    service: ProductServiceInterface = Depends(get_product_service),
) -> Product:
    """Create a new product.

    Returns HTTP 422 listing every violated field when ``title`` or
    ``description`` is empty or ``price`` is not positive.
    """
    draft = payload.to_product()
    try:
        ensure_valid(draft)
    except ValidationError as exc:
        raise HTTPException(status_code=UNPROCESSABLE, detail=exc.message) from exc
    try:
        return service.create_product(draft)
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create product",
        ) from exc


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int = Depends(product_id_param),
    service: ProductServiceInterface = Depends(get_product_service),
) -> Product:
    """Retrieve a single product by its ID; 404 if absent or deleted."""
    try:
        return service.get_product_by_id(product_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND) from exc
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get product",
        ) from exc


@router.put("/{product_id}", response_model=Product)
@router.post("/{product_id}", response_model=Product)
def update_product(
    product_id: int = Depends(product_id_param),
    payload: ProductPayload = Depends(product_payload),
    service: ProductServiceInterface = Depends(get_product_service),
) -> Product:
    """Partially update a product.

    Fields left empty (or a zero price) keep their stored value.  The
    merged product is validated again before it is written.
    """
    try:
        existing = service.get_product_by_id(product_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND) from exc
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get product",
        ) from exc

    merged = payload.apply_to(existing)
    try:
        ensure_valid(merged)
    except ValidationError as exc:
        raise HTTPException(status_code=UNPROCESSABLE, detail=exc.message) from exc

    try:
        return service.update_product(merged)
    except NotFoundError as exc:
        # deleted between the read and the write
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND) from exc
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update product",
        ) from exc


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int = Depends(product_id_param),
    service: ProductServiceInterface = Depends(get_product_service),
) -> None:
    """Soft-delete a product.

    Deleting an unknown or already deleted product also answers 204.
    """
    try:
        service.delete_product(product_id)
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete product",
        ) from exc
    return None
