"""
NoteKeeper Backend - Health Check Route
========================================

What:  Liveness probe for monitoring and container health checks.
How:   Reports version, uptime, and how many notes the store holds.
       The store is in-process memory, so there is no external dependency
       that could make the service degraded; answering at all means healthy.
"""

import logging
import time

from fastapi import APIRouter, Depends

from notekeeper import __version__
from notekeeper.dependencies import get_note_store
from notekeeper.schemas.note import HealthResponse
from notekeeper.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=await store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
