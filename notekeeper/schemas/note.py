"""
NoteKeeper Backend - Pydantic Schemas
======================================

What:  Pydantic models for the stored note value and the API contract.
How:   FastAPI validates request bodies against `Note` and serializes the
       response models below. The same `Note` model is what NoteStore holds.
Who:   Used by NoteStore, route handlers, and tests.

Wire format of a note (matches the original service):
    {"title": "t1", "note": "n1"}

    The body is read in Python as `Note.body` but is only ever written under
    the JSON key "note", including when constructing a value in Python:
    `Note(title="t1", note="n1")`. A payload using "body" is rejected.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Stored Value
# ══════════════════════════════════════════════════════════════════════════


class Note(BaseModel):
    """
    What:  A title/body pair. Identity is assigned by the store, not carried here.
    How:   Frozen, so an update always replaces the whole value.

    No content validation beyond both fields being strings; empty strings
    are accepted.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Note title")
    body: str = Field(alias="note", description="Note text")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """
    Confirmation returned by root, create, update and delete.

    `id` is the note the request acted on; null for the root listing.
    """

    message: str = Field(description="Human-readable confirmation")
    id: Optional[int] = Field(default=None, description="Note identifier")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '7' was not found",
            "request_id": "1f2e3d4c"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
