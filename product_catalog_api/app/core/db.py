"""
SQLite database integration and simple migration system.

This module provides functions for resolving the database file from
configuration (``get_database_path``), obtaining a connection
(``get_connection``) and applying migrations on application start
(``init_db``).  Every caller gets its own short-lived connection; the
repository opens one per operation so that each call is a single
implicit transaction.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

SQLITE_URL_PREFIX = "sqlite:///"

# Append new migrations with an incremented version number; never edit
# one that has shipped.
MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title VARCHAR(255) NOT NULL,
            description TEXT NOT NULL,
            price DECIMAL(20, 2) NOT NULL,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP NOT NULL,
            deleted_at TIMESTAMP
        );

        CREATE INDEX IF NOT EXISTS idx_products_deleted_at ON products(deleted_at);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    A ``sqlite:///`` prefix is stripped.  Absolute paths are returned
    as is; relative ones are resolved against the project root.
    """
    db_url = database_url
    if db_url.startswith(SQLITE_URL_PREFIX):
        db_url = db_url[len(SQLITE_URL_PREFIX):]
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    Timestamps are stored as ISO strings and parsed by the pydantic
    models, so SQLite type detection stays off.
    """
    conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor inside one transaction.

    Commits when the block exits cleanly, rolls back if it raises and
    always closes the connection.
    """
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    except BaseException:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_path: str) -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries from
    ``MIGRATIONS``.  Returns the schema version after the run.
    """
    parent = os.path.dirname(database_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with get_cursor(database_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version

    return current_version
