"""
NoteKeeper Backend - Notes Route Handlers
==========================================

What:  HTTP surface of the note store: root listing, create, get, update, delete.
How:   Each handler resolves the shared NoteStore via Depends(get_note_store),
       awaits exactly one store operation, and wraps the result in a response
       model. Store errors propagate to the global handlers in main.py.

Route Inventory:
    GET    /               -> list of available operations
    POST   /create         -> store a note, returns the assigned id
    GET    /get/{id}       -> the stored note, 404 if absent
    PUT    /update/{id}    -> upsert a note at id
    DELETE /delete/{id}    -> remove a note (missing ids succeed)

Ids are unsigned 32-bit integers. Anything else is rejected by FastAPI with
422 before the handler runs.
"""

import logging

from fastapi import APIRouter, Depends, Path

from notekeeper.dependencies import get_note_store
from notekeeper.schemas.note import ErrorResponse, MessageResponse, Note
from notekeeper.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

MAX_NOTE_ID = 2**32 - 1

AVAILABLE_METHODS = ("create", "get", "update", "delete")


def _note_id_param(description: str):
    return Path(..., ge=0, le=MAX_NOTE_ID, description=description)


@router.get(
    "/",
    response_model=MessageResponse,
    summary="List available operations",
)
async def root() -> MessageResponse:
    return MessageResponse(
        message=f"Available methods are {', '.join(AVAILABLE_METHODS)}"
    )


@router.post(
    "/create",
    response_model=MessageResponse,
    summary="Create a note",
    description="Stores the note and returns the id assigned by the server.",
)
async def create_note(
    note: Note,
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    note_id = await store.create(note)
    logger.info("Note %d created", note_id)
    return MessageResponse(message=f"Note created with id: {note_id}", id=note_id)


@router.get(
    "/get/{note_id}",
    response_model=Note,
    responses={
        200: {"description": "The stored note", "model": Note},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a note by id",
)
async def read_note(
    note_id: int = _note_id_param("Id returned by /create"),
    store: NoteStore = Depends(get_note_store),
) -> Note:
    """
    Raises:
        NotFoundError: no note at `note_id` (-> 404 via the global handler)
    """
    return await store.read(note_id)


@router.put(
    "/update/{note_id}",
    response_model=MessageResponse,
    summary="Replace a note",
    description=(
        "Stores the note at the given id. The id does not need to exist: "
        "updating an unknown id creates it."
    ),
)
async def update_note(
    note: Note,
    note_id: int = _note_id_param("Id of the note to replace"),
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    # The store does not advance its counter here, so a later create()
    # reaching this id will overwrite the note.
    if note_id > store.last_id:
        logger.warning(
            "Update at id %d beyond last allocated id %d; a future create may overwrite it",
            note_id,
            store.last_id,
        )
    await store.update(note_id, note)
    logger.info("Note %d updated", note_id)
    return MessageResponse(message="Updated note", id=note_id)


@router.delete(
    "/delete/{note_id}",
    response_model=MessageResponse,
    summary="Delete a note",
    description="Removes the note. Deleting an id that holds no note also succeeds.",
)
async def delete_note(
    note_id: int = _note_id_param("Id of the note to delete"),
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    await store.delete(note_id)
    logger.info("Note %d deleted", note_id)
    return MessageResponse(message=f"Note deleted with id: {note_id}", id=note_id)
