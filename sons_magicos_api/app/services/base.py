"""
Abstract contract for the instrument collaborator.

The HTTP layer depends only on this interface.  Implementations own
persistence, filtering and aggregation; they report absence through
``None`` / ``False`` return values rather than exceptions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from sons_magicos_api.app.schemas.instrument import (
    InstrumentCreate,
    InstrumentRead,
    InstrumentType,
    InstrumentUpdate,
)


class InstrumentServiceBase(ABC):
    """Capability set consumed by the instrument endpoints."""

    @abstractmethod
    async def list_instruments(self, filter: Optional[str] = None) -> List[InstrumentRead]:
        """Return all instruments, optionally narrowed by a free‑text filter."""

    @abstractmethod
    async def get_instrument(self, instrument_id: int) -> Optional[InstrumentRead]:
        """Return the instrument with ``instrument_id`` or ``None``."""

    @abstractmethod
    async def add(self, data: InstrumentCreate) -> InstrumentRead:
        """Store a new instrument and return it with its assigned id."""

    @abstractmethod
    async def update(self, data: InstrumentUpdate) -> bool:
        """Replace the instrument identified by ``data.id``.

        Returns ``False`` if no instrument with that id exists.
        """

    @abstractmethod
    async def remove(self, instrument_id: int) -> bool:
        """Delete an instrument.

        Returns ``False`` if no instrument with that id exists, which
        lets callers detect a concurrent delete.
        """

    @abstractmethod
    async def total_value_by_type(self, instrument_type: InstrumentType) -> Decimal:
        """Sum ``value`` over all instruments of ``instrument_type``."""
