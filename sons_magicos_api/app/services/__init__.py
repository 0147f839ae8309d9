"""
Service layer abstraction.

The endpoints talk to :class:`~.base.InstrumentServiceBase` only.  The
SQLite implementation in ``instrument_service`` is the default; tests and
alternative stores can substitute their own implementation through
FastAPI dependency overrides.
"""
