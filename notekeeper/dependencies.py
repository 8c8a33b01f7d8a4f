"""
NoteKeeper Backend - FastAPI Dependencies
==========================================

What:  Resolves the shared NoteStore for route handlers.
How:   create_app() attaches one NoteStore to `app.state.note_store`;
       handlers declare `store: NoteStore = Depends(get_note_store)`.

Tests swap the store by passing their own instance to create_app().
"""

from fastapi import Request

from notekeeper.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """Return the NoteStore owned by the running application."""
    return request.app.state.note_store
