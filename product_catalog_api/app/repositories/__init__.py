"""
Persistence gateways.

Repositories translate catalog operations into table reads and writes.
They raise ``NotFoundError`` for a missing row and ``StorageError`` for
any other database failure; nothing above them talks to SQLite.
"""

from .product_repository import SQLiteProductRepository

__all__ = ["SQLiteProductRepository"]
