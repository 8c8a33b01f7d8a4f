"""
NoteKeeper Backend - Note Store
================================

What:  The in-memory note collection plus its id counter, behind one lock.
How:   Every operation acquires a single asyncio.Lock, touches only in-memory
       structures, and releases it before returning. Nothing awaits while the
       lock is held, so operations are linearizable.
Who:   Created once by create_app() and handed to route handlers through
       FastAPI dependency injection (see notekeeper.dependencies).

State:
    next_id   starts at 0, incremented by create() only, never decreases
    notes     dict mapping NoteId -> Note

Ids handed out by create() are 1, 2, 3, ... and are never reused, even after
the note is deleted.

Upsert quirk:
    update() writes at any id without touching next_id. Writing at an id
    above next_id leaves an out-of-band key that a later create() reaching
    the same id will overwrite. Callers that care can compare against
    `last_id` before updating; the store keeps the original behaviour.

Id range:
    The counter itself is unbounded, while the HTTP layer only accepts ids up
    to 2**32 - 1; a note created past that point could not be addressed by
    /get, /update or /delete.
"""

import asyncio
from typing import Dict

from notekeeper.exceptions import NotFoundError
from notekeeper.schemas.note import Note


class NoteStore:
    """
    Lock-guarded mapping of note ids to notes.

    The store never logs and never raises anything except NotFoundError
    from read().
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._next_id: int = 0
        self._notes: Dict[int, Note] = {}

    @property
    def last_id(self) -> int:
        """Most recently allocated id (0 before the first create)."""
        return self._next_id

    async def create(self, note: Note) -> int:
        """Store `note` under a freshly allocated id and return the id."""
        async with self._lock:
            self._next_id += 1
            self._notes[self._next_id] = note
            return self._next_id

    async def read(self, note_id: int) -> Note:
        """
        Return a copy of the note stored at `note_id`.

        Raises:
            NotFoundError: nothing is stored at `note_id`
        """
        async with self._lock:
            note = self._notes.get(note_id)
            if note is None:
                raise NotFoundError(resource="note", resource_id=note_id)
            return note.model_copy()

    async def update(self, note_id: int, note: Note) -> None:
        """Store `note` at `note_id`, creating the slot if it is absent."""
        async with self._lock:
            self._notes[note_id] = note

    async def delete(self, note_id: int) -> None:
        """Remove the note at `note_id`. Missing ids are not an error."""
        async with self._lock:
            self._notes.pop(note_id, None)

    async def count(self) -> int:
        async with self._lock:
            return len(self._notes)
