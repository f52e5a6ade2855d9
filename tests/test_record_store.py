"""
Recordbook: Record Store Tests
=================================

What:  Tests for RecordStore against a real SQLite file per test.

What we test:
    ✅ Ids are assigned by the store on insert
    ✅ Create → get_one round trip
    ✅ Update/delete of a missing id raise NotFoundError
    ✅ Undecodable rows and missing tables surface as DatabaseError
"""

import pytest
from sqlalchemy import text

from recordbook.database import build_engine, build_session_factory, dispose_engine
from recordbook.exceptions import DatabaseError, NotFoundError
from recordbook.services.record_store import RecordStore


class TestCreateAndRead:

    @pytest.mark.asyncio
    async def test_create_assigns_sequential_ids(self, record_store):
        first = await record_store.create("Alice", 30)
        second = await record_store.create("Bob", 41)

        assert first.id == 1
        assert second.id == 2
        assert (first.name, first.age) == ("Alice", 30)

    @pytest.mark.asyncio
    async def test_create_then_get_one(self, record_store):
        created = await record_store.create("Carol", 52)

        fetched = await record_store.get_one(created.id)

        assert fetched == created

    @pytest.mark.asyncio
    async def test_get_all_empty(self, record_store):
        assert await record_store.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_ordered_by_id(self, record_store):
        await record_store.create("Alice", 30)
        await record_store.create("Bob", 31)

        records = await record_store.get_all()

        assert [r.name for r in records] == ["Alice", "Bob"]
        assert [r.id for r in records] == [1, 2]

    @pytest.mark.asyncio
    async def test_get_one_missing(self, record_store):
        with pytest.raises(NotFoundError, match="record with ID '7' was not found"):
            await record_store.get_one(7)


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_existing(self, record_store):
        created = await record_store.create("Alice", 30)

        updated = await record_store.update(created.id, "Bob", 31)

        assert updated.model_dump() == {"id": created.id, "name": "Bob", "age": 31}
        assert await record_store.get_one(created.id) == updated

    @pytest.mark.asyncio
    async def test_update_with_unchanged_values(self, record_store):
        created = await record_store.create("Alice", 30)

        updated = await record_store.update(created.id, "Alice", 30)

        assert updated == created

    @pytest.mark.asyncio
    async def test_update_missing(self, record_store):
        with pytest.raises(NotFoundError):
            await record_store.update(99, "Bob", 31)


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_existing(self, record_store):
        created = await record_store.create("Alice", 30)

        await record_store.delete(created.id)

        with pytest.raises(NotFoundError):
            await record_store.get_one(created.id)
        assert await record_store.get_all() == []

    @pytest.mark.asyncio
    async def test_delete_missing(self, record_store):
        with pytest.raises(NotFoundError):
            await record_store.delete(1)

    @pytest.mark.asyncio
    async def test_delete_twice(self, record_store):
        created = await record_store.create("Alice", 30)
        await record_store.delete(created.id)

        with pytest.raises(NotFoundError):
            await record_store.delete(created.id)


class TestStoreFailures:

    @pytest.mark.asyncio
    async def test_undecodable_row_fails_listing(self, engine, record_store):
        await record_store.create("Alice", 30)
        async with engine.begin() as conn:
            await conn.execute(text("INSERT INTO records (name, age) VALUES (NULL, 5)"))

        with pytest.raises(DatabaseError, match="Could not retrieve records"):
            await record_store.get_all()

    @pytest.mark.asyncio
    async def test_undecodable_row_fails_get_one(self, engine, record_store):
        async with engine.begin() as conn:
            await conn.execute(text("INSERT INTO records (id, name, age) VALUES (3, NULL, 5)"))

        with pytest.raises(DatabaseError):
            await record_store.get_one(3)

    @pytest.mark.asyncio
    async def test_missing_table_is_database_error(self, make_settings, tmp_path):
        engine = build_engine(make_settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}"))
        store = RecordStore(build_session_factory(engine))
        try:
            with pytest.raises(DatabaseError, match="no such table"):
                await store.create("Alice", 30)
            with pytest.raises(DatabaseError):
                await store.update(1, "Alice", 30)
            with pytest.raises(DatabaseError):
                await store.delete(1)
            with pytest.raises(DatabaseError):
                await store.get_all()
        finally:
            await dispose_engine(engine)

    @pytest.mark.asyncio
    async def test_ping(self, record_store):
        await record_store.ping()
