"""
Service layer for insurance providers.

``ProviderService`` is the data‑access contract the HTTP layer calls
into.  It is constructed with an explicit ``Database`` handle and
implements listing with optional price bounds, lookup, creation,
deletion and the development reset‑and‑seed operation.

Provider records are validated with ``ProviderCreate``, so records
posted to the API and seed records follow the same rules.  Failures
are reported with the exceptions from ``core.errors``; raw ``sqlite3``
errors never leave this module.
"""

from __future__ import annotations

import logging
import math
import re
import sqlite3
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError as SchemaValidationError

from insureconnect_api.app.core.db import Database
from insureconnect_api.app.core.errors import (
    DuplicateError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from insureconnect_api.app.core.seed import SAMPLE_PROVIDERS
from insureconnect_api.app.schemas.provider import ProviderCreate, ProviderRead, describe_provider_errors

logger = logging.getLogger(__name__)

PROVIDER_COLUMNS = "provider_id, name, price, website_link, created_at, updated_at"

PriceBound = Union[str, int, float, None]

# Plain decimal notation only: no digit separators, hex or trailing units.
DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_price_bound(value: PriceBound, label: str) -> Optional[float]:
    """Parse an optional price bound.

    ``None`` and blank strings mean "no bound".  Strings must hold a
    plain decimal number (``"450"``, ``"12.5"``, ``"1e3"``) and nothing
    else; ``"1_000"``, ``"0x10"`` and ``"200usd"`` are all rejected with
    ``ValidationError("Invalid <label> price")``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label} price")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if not DECIMAL_RE.fullmatch(value):
            raise ValidationError(f"Invalid {label} price")
    elif not isinstance(value, (int, float)):
        raise ValidationError(f"Invalid {label} price")
    number = float(value)
    if not math.isfinite(number):
        raise ValidationError(f"Invalid {label} price")
    return number


def validate_provider(record: Union[ProviderCreate, Mapping[str, Any]]) -> ProviderCreate:
    """Validate a raw provider record against ``ProviderCreate``.

    Already validated models are returned unchanged.  Schema errors are
    reported as a single ``ValidationError`` with the API's message.
    """
    if isinstance(record, ProviderCreate):
        return record
    try:
        return ProviderCreate.model_validate(record)
    except SchemaValidationError as exc:
        raise ValidationError(describe_provider_errors(exc.errors())) from None


class ProviderService:
    """Provider store backed by a ``Database`` handle."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_providers(
        self,
        min_price: PriceBound = None,
        max_price: PriceBound = None,
    ) -> List[ProviderRead]:
        """Return providers ordered by ascending price.

        Both bounds are inclusive.  The bounds are validated before the
        database is touched: the minimum first, then the maximum, then
        their order.
        """
        low = parse_price_bound(min_price, "minimum")
        high = parse_price_bound(max_price, "maximum")
        if low is not None and high is not None and low > high:
            raise ValidationError("Minimum price cannot be greater than maximum price")

        query = f"SELECT {PROVIDER_COLUMNS} FROM providers"
        params: list = []
        where_clauses: list[str] = []
        if low is not None:
            where_clauses.append("price >= ?")
            params.append(low)
        if high is not None:
            where_clauses.append("price <= ?")
            params.append(high)
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        # Ties keep insertion order so repeated listings are stable.
        query += " ORDER BY price ASC, id ASC"
        try:
            rows = self.db.connection.execute(query, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            logger.exception("Error fetching providers")
            raise StoreError("Server error while fetching providers") from exc
        return [self._row_to_provider_read(row) for row in rows]

    async def get_provider(self, provider_id: str) -> ProviderRead:
        try:
            row = self.db.connection.execute(
                f"SELECT {PROVIDER_COLUMNS} FROM providers WHERE provider_id = ?",
                (provider_id,),
            ).fetchone()
        except sqlite3.Error as exc:
            logger.exception("Error fetching provider %s", provider_id)
            raise StoreError("Server error while fetching provider") from exc
        if row is None:
            raise NotFoundError("Provider not found")
        return self._row_to_provider_read(row)

    async def create_provider(self, record: Union[ProviderCreate, Mapping[str, Any]]) -> ProviderRead:
        """Insert a new provider and return the stored record.

        The unique index on ``provider_id`` decides duplicates, so two
        concurrent inserts of the same id cannot both succeed.
        """
        data = validate_provider(record)
        try:
            with self.db.transaction() as cursor:
                self._insert(cursor, data)
        except sqlite3.IntegrityError as exc:
            if "UNIQUE" in str(exc).upper():
                logger.info("Rejected duplicate provider %s", data.provider_id)
                raise DuplicateError("Provider ID already exists") from exc
            logger.exception("Error creating provider %s", data.provider_id)
            raise StoreError("Server error while creating provider") from exc
        except sqlite3.Error as exc:
            logger.exception("Error creating provider %s", data.provider_id)
            raise StoreError("Server error while creating provider") from exc
        logger.info("Created provider %s (%s)", data.provider_id, data.name)
        return await self.get_provider(data.provider_id)

    async def delete_provider(self, provider_id: str) -> None:
        try:
            with self.db.transaction() as cursor:
                cursor.execute("DELETE FROM providers WHERE provider_id = ?", (provider_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            logger.exception("Error deleting provider %s", provider_id)
            raise StoreError("Server error while deleting provider") from exc
        if not affected:
            raise NotFoundError("Provider not found")
        logger.info("Deleted provider %s", provider_id)

    async def count_providers(self) -> int:
        try:
            row = self.db.connection.execute("SELECT COUNT(*) AS total FROM providers").fetchone()
        except sqlite3.Error as exc:
            logger.exception("Error counting providers")
            raise StoreError("Server error while counting providers") from exc
        return int(row["total"])

    async def reset_and_seed(self, records: Optional[Iterable[Mapping[str, Any]]] = None) -> int:
        """Replace the whole collection with ``records``.

        Defaults to the bundled development dataset.  Deletion and
        insertion share one transaction; if any insert fails nothing
        is changed.  Returns the number of providers inserted.
        """
        if records is None:
            records = SAMPLE_PROVIDERS
        providers = [validate_provider(record) for record in records]
        try:
            with self.db.transaction() as cursor:
                cursor.execute("DELETE FROM providers")
                for data in providers:
                    self._insert(cursor, data)
        except sqlite3.IntegrityError as exc:
            logger.exception("Seed data contains duplicate provider ids")
            raise DuplicateError("Provider ID already exists") from exc
        except sqlite3.Error as exc:
            logger.exception("Error seeding database")
            raise StoreError("Error seeding database") from exc
        logger.info("Seeded database with %s providers", len(providers))
        return len(providers)

    @staticmethod
    def _insert(cursor: sqlite3.Cursor, data: ProviderCreate) -> None:
        cursor.execute(
            """
            INSERT INTO providers (provider_id, name, price, website_link)
            VALUES (?, ?, ?, ?)
            """,
            (data.provider_id, data.name, data.price, data.website_link),
        )

    @staticmethod
    def _row_to_provider_read(row: sqlite3.Row) -> ProviderRead:
        """Convert a database row to a ``ProviderRead`` instance."""
        price: Union[int, float] = row["price"]
        if isinstance(price, float) and price.is_integer():
            price = int(price)
        return ProviderRead(
            provider_id=row["provider_id"],
            name=row["name"],
            price=price,
            website_link=row["website_link"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
