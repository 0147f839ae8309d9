"""Tests for the SQLite-backed InstrumentService against a temporary database."""

from __future__ import annotations

import sqlite3
from decimal import Decimal

import pytest

from sons_magicos_api.app.core.db import MIGRATIONS, get_connection, init_db
from sons_magicos_api.app.schemas.instrument import InstrumentCreate, InstrumentType, InstrumentUpdate
from sons_magicos_api.app.services.instrument_service import InstrumentService


def _create(name: str, type_: InstrumentType, value: str, description: str | None = None) -> InstrumentCreate:
    return InstrumentCreate(name=name, description=description, type=type_, value=Decimal(value))


@pytest.fixture
def svc(database):
    return InstrumentService()


class TestMigrations:
    def test_init_db_is_idempotent(self, database):
        init_db()
        conn = sqlite3.connect(database)
        try:
            versions = [row[0] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
        finally:
            conn.close()
        assert versions == [version for version, _ in MIGRATIONS]


class TestCrud:
    @pytest.mark.asyncio
    async def test_add_assigns_increasing_ids(self, svc):
        first = await svc.add(_create("Drum", InstrumentType.PERCUSSION, "150.00"))
        second = await svc.add(_create("Flute", InstrumentType.WIND, "80.00"))

        assert first.id >= 1
        assert second.id > first.id
        assert first.name == "Drum"

    @pytest.mark.asyncio
    async def test_get_round_trips_fields(self, svc):
        created = await svc.add(_create("Piano", InstrumentType.KEYBOARD, "1999.99", "Upright"))

        fetched = await svc.get_instrument(created.id)

        assert fetched == created
        assert fetched.value == Decimal("1999.99")

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, svc):
        assert await svc.get_instrument(12345) is None

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, svc):
        created = await svc.add(_create("Violin", InstrumentType.STRING, "300.00"))

        ok = await svc.update(
            InstrumentUpdate(id=created.id, name="Viola", type=InstrumentType.STRING, value=Decimal("350.00"))
        )

        assert ok is True
        fetched = await svc.get_instrument(created.id)
        assert fetched.name == "Viola"
        assert fetched.value == Decimal("350.00")

    @pytest.mark.asyncio
    async def test_update_missing_returns_false(self, svc):
        ok = await svc.update(
            InstrumentUpdate(id=777, name="Ghost", type=InstrumentType.WIND, value=Decimal("1"))
        )
        assert ok is False

    @pytest.mark.asyncio
    async def test_remove_reports_whether_a_row_was_deleted(self, svc):
        created = await svc.add(_create("Synth", InstrumentType.ELECTRONIC, "499.00"))

        assert await svc.remove(created.id) is True
        assert await svc.remove(created.id) is False
        assert await svc.get_instrument(created.id) is None


class TestListing:
    @pytest.mark.asyncio
    async def test_list_without_filter_is_ordered_by_id(self, svc):
        a = await svc.add(_create("Drum", InstrumentType.PERCUSSION, "150.00"))
        b = await svc.add(_create("Harp", InstrumentType.STRING, "900.00"))

        result = await svc.list_instruments()

        assert [i.id for i in result] == [a.id, b.id]

    @pytest.mark.asyncio
    async def test_blank_filter_means_no_filter(self, svc):
        await svc.add(_create("Drum", InstrumentType.PERCUSSION, "150.00"))

        assert len(await svc.list_instruments("   ")) == 1

    @pytest.mark.asyncio
    async def test_filter_matches_name_and_description_case_insensitively(self, svc):
        drum = await svc.add(_create("Snare DRUM", InstrumentType.PERCUSSION, "150.00"))
        pad = await svc.add(_create("Pad", InstrumentType.ELECTRONIC, "60.00", "Electronic drum pad"))
        await svc.add(_create("Oboe", InstrumentType.WIND, "700.00"))

        result = await svc.list_instruments("drum")

        assert {i.id for i in result} == {drum.id, pad.id}

    @pytest.mark.asyncio
    async def test_filter_treats_wildcards_literally(self, svc):
        await svc.add(_create("Drum", InstrumentType.PERCUSSION, "150.00"))

        assert await svc.list_instruments("%") == []
        assert await svc.list_instruments("_") == []

    @pytest.mark.asyncio
    async def test_empty_store_lists_nothing(self, svc):
        assert await svc.list_instruments() == []


class TestTotalValueByType:
    @pytest.mark.asyncio
    async def test_sums_exactly(self, svc):
        await svc.add(_create("Violin", InstrumentType.STRING, "0.10"))
        await svc.add(_create("Cello", InstrumentType.STRING, "0.20"))
        await svc.add(_create("Drum", InstrumentType.PERCUSSION, "150.00"))

        total = await svc.total_value_by_type(InstrumentType.STRING)

        assert total == Decimal("0.30")

    @pytest.mark.asyncio
    async def test_zero_when_no_match(self, svc):
        await svc.add(_create("Drum", InstrumentType.PERCUSSION, "150.00"))

        assert await svc.total_value_by_type(InstrumentType.KEYBOARD) == Decimal("0")

    @pytest.mark.asyncio
    async def test_removed_instruments_are_not_counted(self, svc):
        kept = await svc.add(_create("Flute", InstrumentType.WIND, "80.00"))
        gone = await svc.add(_create("Tuba", InstrumentType.WIND, "1200.00"))
        await svc.remove(gone.id)

        assert await svc.total_value_by_type(InstrumentType.WIND) == kept.value


def test_connection_uses_row_factory(database):
    conn = get_connection()
    try:
        row = conn.execute("SELECT 1 AS one").fetchone()
    finally:
        conn.close()
    assert row["one"] == 1
