# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a fresh in-memory store per test
# - Provides a TestClient wired to that store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_store
from app.main import app
from core.database import BlogRepository
from core.services import AuthorService, BlogPostService
from lib.document_store import InMemoryDocumentStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Empty in-memory store with the userName unique index."""
    return InMemoryDocumentStore(unique={"authors": ("user_name",)})


@pytest.fixture
def repository(store):
    return BlogRepository(store)


@pytest.fixture
def author_service(repository):
    return AuthorService(repository)


@pytest.fixture
def blogpost_service(repository):
    return BlogPostService(repository)


@pytest.fixture
def client(store):
    """TestClient whose requests all hit the `store` fixture."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def ada_payload():
    return {"firstName": "Ada", "lastName": "Lovelace", "userName": "ada"}


@pytest.fixture
def make_author(author_service):
    """Create an author through the service and return it."""
    def _make(first="Ada", last="Lovelace", user_name="ada"):
        return author_service.create_author(
            {"firstName": first, "lastName": last, "userName": user_name}
        )
    return _make


@pytest.fixture
def make_blogpost(blogpost_service):
    """Create a blog post for an existing author and return it."""
    def _make(author_id, title="T", content="C"):
        return blogpost_service.create_blogpost(
            {"title": title, "content": content, "author_id": author_id}
        )
    return _make
