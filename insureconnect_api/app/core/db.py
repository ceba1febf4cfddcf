"""
SQLite database handle and simple migration system.

The ``Database`` class owns the single long‑lived connection used by
the API.  It is created once by ``create_app``, opened on startup and
closed on shutdown; services receive it explicitly instead of reaching
for a module‑level connection.  Opening the handle applies pending
migrations, which are stored as ``(version, sql)`` pairs and recorded
in the ``migrations`` table.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .errors import StoreError

logger = logging.getLogger(__name__)

MEMORY_URL = ":memory:"

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: provider collection
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS providers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            provider_id TEXT NOT NULL UNIQUE,
            name TEXT NOT NULL,
            price REAL NOT NULL CHECK (price >= 0),
            website_link TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')),
            updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
        );

        -- Listing is always filtered and sorted by price
        CREATE INDEX IF NOT EXISTS idx_providers_price ON providers(price);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the SQLite path for ``database_url``.

    ``:memory:`` and absolute paths are returned unchanged; anything
    else is resolved relative to the ``insureconnect_api`` package
    directory.
    """
    if database_url == MEMORY_URL or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # insureconnect_api/
    return str((base_dir / database_url).resolve())


class Database:
    """Explicit handle around one shared SQLite connection."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Connect and apply pending migrations.

        Raises ``StoreError`` if the database cannot be opened; the
        handle then stays closed.
        """
        if self._conn is not None:
            return
        path = resolve_database_path(self.database_url)
        try:
            # Requests may be served from worker threads, so the
            # connection must not be pinned to the opening thread.
            conn = sqlite3.connect(path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            self._apply_migrations(conn)
        except sqlite3.Error as exc:
            logger.error("Could not open database %s: %s", path, exc)
            raise StoreError(f"Could not open database: {exc}") from exc
        self._conn = conn
        logger.info("Database opened at %s", path)

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Database closed")

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("Database connection is not available")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on any error."""
        conn = self.connection
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            cursor.close()

    @staticmethod
    def _apply_migrations(conn: sqlite3.Connection) -> None:
        cursor = conn.cursor()
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                current_version = version
                logger.info("Applied migration %s", version)
        conn.commit()
