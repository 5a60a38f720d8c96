"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from quicknotes.app import App
from quicknotes.config import Config
from quicknotes.core.modules.note.service import NoteService
from quicknotes.web.server import create_fastapi_app


@pytest.fixture
def config():
    """Create a config that ignores any local .env file."""
    return Config(_env_file=None)


@pytest.fixture
def note_service():
    """Create a fresh store holding only the seeded notes."""
    return NoteService()


@pytest.fixture
def client(config):
    """Create a test client over a freshly started application."""
    fastapi_app = create_fastapi_app(App(config), config)
    with TestClient(fastapi_app) as test_client:
        yield test_client
