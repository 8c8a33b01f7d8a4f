"""
NoteKeeper Backend - NoteStore Unit Tests
==========================================

What:  Tests for the lock-guarded note store (create, read, update, delete).
How:   Drives the store directly, no HTTP. Concurrency is exercised with
       asyncio.gather on a single event loop.
"""

import asyncio

import pytest

from notekeeper.exceptions import NotFoundError
from notekeeper.schemas.note import Note
from notekeeper.services.note_store import NoteStore


class TestNoteStoreCreate:
    """Tests for id allocation."""

    @pytest.mark.asyncio
    async def test_first_id_is_one(self, note_store, sample_note):
        assert note_store.last_id == 0
        assert await note_store.create(sample_note) == 1
        assert note_store.last_id == 1

    @pytest.mark.asyncio
    async def test_sequential_ids_strictly_increase(self, note_store):
        ids = []
        for i in range(5):
            ids.append(await note_store.create(Note(title=f"t{i}", note=f"n{i}")))

        assert ids == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_concurrent_creates_get_distinct_ids(self, note_store):
        """100 creates racing on one loop still get ids 1..100 exactly once."""
        notes = [Note(title=f"t{i}", note=f"n{i}") for i in range(100)]

        ids = await asyncio.gather(*(note_store.create(n) for n in notes))

        assert sorted(ids) == list(range(1, 101))
        assert note_store.last_id == 100
        # Each note landed under the id its own create returned
        for note, note_id in zip(notes, ids):
            assert await note_store.read(note_id) == note

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete(self, note_store, sample_note):
        first = await note_store.create(sample_note)
        await note_store.delete(first)

        second = await note_store.create(sample_note)

        assert second == first + 1

    @pytest.mark.asyncio
    async def test_counter_not_capped_at_http_id_range(self, note_store, sample_note):
        """The store keeps counting past 2**32 - 1; only the HTTP layer caps ids."""
        note_store._next_id = 2**32 - 1

        note_id = await note_store.create(sample_note)

        assert note_id == 2**32
        assert await note_store.read(note_id) == sample_note


class TestNoteStoreRead:
    """Tests for read and NotFound."""

    @pytest.mark.asyncio
    async def test_read_after_create(self, note_store, sample_note):
        note_id = await note_store.create(sample_note)

        assert await note_store.read(note_id) == Note(title="t1", note="n1")

    @pytest.mark.asyncio
    async def test_read_returns_copy(self, note_store, sample_note):
        note_id = await note_store.create(sample_note)

        first = await note_store.read(note_id)
        second = await note_store.read(note_id)

        assert first == second == sample_note
        assert first is not second

    @pytest.mark.asyncio
    async def test_read_never_allocated_id(self, note_store):
        with pytest.raises(NotFoundError) as exc_info:
            await note_store.read(42)

        assert exc_info.value.resource == "note"
        assert exc_info.value.resource_id == 42
        assert "42" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_read_after_delete_fails(self, note_store, sample_note):
        note_id = await note_store.create(sample_note)
        await note_store.delete(note_id)

        with pytest.raises(NotFoundError):
            await note_store.read(note_id)


class TestNoteStoreUpdate:
    """Tests for upsert semantics."""

    @pytest.mark.asyncio
    async def test_update_replaces_existing(self, note_store, sample_note):
        note_id = await note_store.create(sample_note)
        updated = Note(title="t1", note="n1-updated")

        await note_store.update(note_id, updated)

        assert await note_store.read(note_id) == updated

    @pytest.mark.asyncio
    async def test_update_creates_missing_id(self, note_store, sample_note):
        with pytest.raises(NotFoundError):
            await note_store.read(7)

        await note_store.update(7, sample_note)

        assert await note_store.read(7) == sample_note

    @pytest.mark.asyncio
    async def test_update_does_not_advance_counter(self, note_store, sample_note):
        await note_store.update(9999, sample_note)

        assert note_store.last_id == 0
        assert await note_store.create(sample_note) == 1

    @pytest.mark.asyncio
    async def test_create_overwrites_out_of_band_update(self, note_store):
        """An upsert ahead of the counter is overwritten once create reaches it."""
        await note_store.update(1, Note(title="manual", note="written by update"))

        note_id = await note_store.create(Note(title="auto", note="written by create"))

        assert note_id == 1
        assert await note_store.read(1) == Note(title="auto", note="written by create")


class TestNoteStoreDelete:
    """Tests for idempotent delete."""

    @pytest.mark.asyncio
    async def test_delete_never_created_id(self, note_store):
        await note_store.delete(123)
        await note_store.delete(123)

        assert await note_store.count() == 0

    @pytest.mark.asyncio
    async def test_delete_removes_only_target(self, note_store):
        keep = await note_store.create(Note(title="keep", note="k"))
        drop = await note_store.create(Note(title="drop", note="d"))

        await note_store.delete(drop)

        assert await note_store.count() == 1
        assert (await note_store.read(keep)).title == "keep"


class TestNoteStoreScenario:
    """End-to-end sequence on a single store."""

    @pytest.mark.asyncio
    async def test_create_read_update_delete(self):
        store = NoteStore()

        note_id = await store.create(Note(title="t1", note="n1"))
        assert note_id == 1
        assert await store.read(1) == Note(title="t1", note="n1")

        await store.update(1, Note(title="t1", note="n1-updated"))
        assert await store.read(1) == Note(title="t1", note="n1-updated")

        await store.delete(1)
        with pytest.raises(NotFoundError):
            await store.read(1)

    @pytest.mark.asyncio
    async def test_mixed_concurrent_operations(self, note_store):
        """Interleaved creates, updates and deletes leave a consistent store."""
        await asyncio.gather(
            *(note_store.create(Note(title="c", note=str(i))) for i in range(20)),
            *(note_store.update(1000 + i, Note(title="u", note=str(i))) for i in range(10)),
            *(note_store.delete(2000 + i) for i in range(10)),
        )

        assert note_store.last_id == 20
        assert await note_store.count() == 30
