"""Shared fixtures: app with a mocked service, Basic credentials, temp database."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from sons_magicos_api.app.api.deps import get_instrument_service
from sons_magicos_api.app.core.config import settings
from sons_magicos_api.app.core.db import init_db
from sons_magicos_api.app.core.security import hash_password
from sons_magicos_api.app.main import create_app
from sons_magicos_api.app.schemas.instrument import InstrumentRead, InstrumentType
from sons_magicos_api.app.services.base import InstrumentServiceBase

USERNAME = "admin"
PASSWORD = "s3cret-pass"
PASSWORD_HASH = hash_password(PASSWORD)
AUTH = (USERNAME, PASSWORD)


def make_instrument(instrument_id: int = 1, **overrides) -> InstrumentRead:
    fields = {
        "id": instrument_id,
        "name": "Drum",
        "description": "Snare drum",
        "type": InstrumentType.PERCUSSION,
        "value": Decimal("150.00"),
    }
    fields.update(overrides)
    return InstrumentRead(**fields)


@pytest.fixture(autouse=True)
def basic_credentials(monkeypatch):
    monkeypatch.setattr(settings, "basic_auth_username", USERNAME)
    monkeypatch.setattr(settings, "basic_auth_password_hash", PASSWORD_HASH)


@pytest.fixture
def service():
    """A service double; every method is an AsyncMock."""
    return AsyncMock(spec=InstrumentServiceBase)


@pytest.fixture
def app(service):
    application = create_app()
    application.dependency_overrides[get_instrument_service] = lambda: service
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    # Unhandled errors must surface as 500 responses rather than exceptions.
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the settings at a fresh SQLite file and migrate it."""
    db_file = tmp_path / "instruments.db"
    monkeypatch.setattr(settings, "database_url", str(db_file))
    init_db()
    return db_file
