"""
SQLite implementation of the instrument service.

Each call opens its own connection through ``core.db.get_connection``
and closes it before returning.  All queries use parameterized
statements.  Monetary values are stored as text and summed with
``Decimal`` so that totals are exact.
"""

from __future__ import annotations

import logging
import sqlite3
from decimal import Decimal
from typing import List, Optional

from sons_magicos_api.app.core.db import get_connection
from sons_magicos_api.app.schemas.instrument import (
    InstrumentCreate,
    InstrumentRead,
    InstrumentType,
    InstrumentUpdate,
)
from sons_magicos_api.app.services.base import InstrumentServiceBase

logger = logging.getLogger(__name__)


class InstrumentService(InstrumentServiceBase):
    """Instrument catalogue backed by the ``instruments`` table."""

    async def list_instruments(self, filter: Optional[str] = None) -> List[InstrumentRead]:
        """Return instruments ordered by id.

        ``filter`` is matched case‑insensitively as a substring of the
        name or the description.  ``None`` or a blank string disables
        filtering.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            query = "SELECT id, name, description, type, value FROM instruments"
            params: list = []
            if filter and filter.strip():
                pattern = f"%{self._escape_like(filter.strip().lower())}%"
                query += (
                    " WHERE lower(name) LIKE ? ESCAPE '\\'"
                    " OR lower(coalesce(description, '')) LIKE ? ESCAPE '\\'"
                )
                params.extend([pattern, pattern])
            query += " ORDER BY id ASC"
            rows = cursor.execute(query, tuple(params)).fetchall()
            return [self._row_to_instrument(row) for row in rows]
        finally:
            conn.close()

    async def get_instrument(self, instrument_id: int) -> Optional[InstrumentRead]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, description, type, value FROM instruments WHERE id = ?",
                (instrument_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_instrument(row)
        finally:
            conn.close()

    async def add(self, data: InstrumentCreate) -> InstrumentRead:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO instruments (name, description, type, value)
                VALUES (?, ?, ?, ?)
                """,
                (data.name, data.description, data.type.value, str(data.value)),
            )
            instrument_id = cursor.lastrowid
            conn.commit()
            logger.info("Created instrument %s (%s)", instrument_id, data.type.value)
            return InstrumentRead(id=instrument_id, **data.model_dump())
        finally:
            conn.close()

    async def update(self, data: InstrumentUpdate) -> bool:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE instruments
                SET name = ?, description = ?, type = ?, value = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (data.name, data.description, data.type.value, str(data.value), data.id),
            )
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Updated instrument %s", data.id)
            return affected > 0
        finally:
            conn.close()

    async def remove(self, instrument_id: int) -> bool:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM instruments WHERE id = ?", (instrument_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted instrument %s", instrument_id)
            return affected > 0
        finally:
            conn.close()

    async def total_value_by_type(self, instrument_type: InstrumentType) -> Decimal:
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT value FROM instruments WHERE type = ?",
                (instrument_type.value,),
            ).fetchall()
            return sum((Decimal(row["value"]) for row in rows), Decimal("0"))
        finally:
            conn.close()

    @staticmethod
    def _escape_like(text: str) -> str:
        return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

    @staticmethod
    def _row_to_instrument(row: sqlite3.Row) -> InstrumentRead:
        """Convert a database row to an InstrumentRead schema instance."""
        return InstrumentRead(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            type=InstrumentType(row["type"]),
            value=Decimal(row["value"]),
        )
