"""
NoteKeeper Backend - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions raised by the store and services.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by NoteStore; caught by the handlers in main.py.

Exception Hierarchy:
    NoteKeeperError (base)        -> 500 Internal Server Error
    └── NotFoundError             -> 404 Not Found

The store has exactly one failure mode (reading an absent id). Transport
problems such as a malformed JSON body or a non-numeric id are rejected by
FastAPI before any handler runs and never reach this hierarchy.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested resource does not exist.

    When:    GET /get/{id} for an id that was never allocated or was deleted.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
