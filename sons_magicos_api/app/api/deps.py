"""Dependency injection — service singleton for ``Depends()``."""

from __future__ import annotations

from sons_magicos_api.app.services.base import InstrumentServiceBase
from sons_magicos_api.app.services.instrument_service import InstrumentService

_instrument_service: InstrumentServiceBase = InstrumentService()


def get_instrument_service() -> InstrumentServiceBase:
    """Return the instrument service used by the endpoints.

    Override with ``app.dependency_overrides[get_instrument_service]`` to
    plug in another store or a test double.
    """
    return _instrument_service
