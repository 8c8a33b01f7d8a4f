"""
NoteKeeper Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped, so every test starts from an empty store):
    ├── note_store:   a fresh NoteStore
    ├── sample_note:  Note(title="t1", note="n1")
    └── test_client:  HTTPX AsyncClient wired to an app serving `note_store`
"""

import os

# Set before any notekeeper import so Settings picks them up
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "http://localhost:3000"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notekeeper.schemas.note import Note
from notekeeper.services.note_store import NoteStore


@pytest.fixture
def note_store():
    """A NoteStore with no notes and last_id == 0."""
    return NoteStore()


@pytest.fixture
def sample_note():
    return Note(title="t1", note="n1")


@pytest_asyncio.fixture
async def test_client(note_store):
    """
    HTTPX AsyncClient talking to a fresh app over ASGITransport.

    The app serves the `note_store` fixture, so a test can drive requests
    and then inspect the store directly.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from notekeeper.main import create_app

    app = create_app(store=note_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
