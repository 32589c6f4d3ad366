"""
SQLite-backed product repository.

Every method opens its own connection through ``get_cursor`` so that
each call runs as one implicit transaction.  Soft-deleted rows
(``deleted_at IS NOT NULL``) are invisible to every read and to
``update``.  All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Callable, List, Optional

from product_catalog_api.app.core.db import get_cursor
from product_catalog_api.app.core.errors import NotFoundError, StorageError
from product_catalog_api.app.core.interfaces import ProductRepositoryInterface
from product_catalog_api.app.schemas.product import PRICE_PLACES, Product

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_COLUMNS = "id, title, description, price, created_at, updated_at, deleted_at"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SQLiteProductRepository(ProductRepositoryInterface):

    def __init__(self, database_path: str, clock: Optional[Clock] = None) -> None:
        self._database_path = database_path
        self._clock = clock or utcnow

    def get_all(self) -> List[Product]:
        try:
            with get_cursor(self._database_path) as cursor:
                rows = cursor.execute(
                    f"SELECT {_COLUMNS} FROM products WHERE deleted_at IS NULL ORDER BY id"
                ).fetchall()
        except sqlite3.Error as exc:
            logger.exception("Failed to list products")
            raise StorageError("Failed to list products") from exc
        return [self._row_to_product(row) for row in rows]

    def create(self, draft: Product) -> Product:
        now = self._clock().isoformat()
        try:
            with get_cursor(self._database_path) as cursor:
                cursor.execute(
                    """
                    INSERT INTO products (title, description, price, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (draft.title, draft.description, round(draft.price, PRICE_PLACES), now, now),
                )
                product_id = cursor.lastrowid
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM products WHERE id = ?", (product_id,)
                ).fetchone()
        except sqlite3.Error as exc:
            logger.exception("Failed to create product %r", draft.title)
            raise StorageError("Failed to create product") from exc
        logger.info("Created product %s", product_id)
        return self._row_to_product(row)

    def get_by_id(self, product_id: int) -> Product:
        try:
            with get_cursor(self._database_path) as cursor:
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM products WHERE id = ? AND deleted_at IS NULL",
                    (product_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            logger.exception("Failed to get product %s", product_id)
            raise StorageError("Failed to get product") from exc
        if row is None:
            raise NotFoundError(product_id)
        return self._row_to_product(row)

    def update(self, product: Product) -> Product:
        """Overwrite title, description and price of a live row.

        ``id`` and ``created_at`` are never written; ``updated_at`` is
        taken from the repository clock rather than from ``product``.
        """
        now = self._clock().isoformat()
        try:
            with get_cursor(self._database_path) as cursor:
                cursor.execute(
                    """
                    UPDATE products
                    SET title = ?, description = ?, price = ?, updated_at = ?
                    WHERE id = ? AND deleted_at IS NULL
                    """,
                    (
                        product.title,
                        product.description,
                        round(product.price, PRICE_PLACES),
                        now,
                        product.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(product.id)
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM products WHERE id = ?", (product.id,)
                ).fetchone()
        except sqlite3.Error as exc:
            logger.exception("Failed to update product %s", product.id)
            raise StorageError("Failed to update product") from exc
        logger.info("Updated product %s", product.id)
        return self._row_to_product(row)

    def delete(self, product_id: int) -> None:
        now = self._clock().isoformat()
        try:
            with get_cursor(self._database_path) as cursor:
                cursor.execute(
                    "UPDATE products SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
                    (now, product_id),
                )
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            logger.exception("Failed to delete product %s", product_id)
            raise StorageError("Failed to delete product") from exc
        if affected:
            logger.info("Soft-deleted product %s", product_id)

    @staticmethod
    def _row_to_product(row: sqlite3.Row) -> Product:
        """Convert a database row to a ``Product`` instance."""
        return Product(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            price=row["price"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            deleted_at=row["deleted_at"],
        )
