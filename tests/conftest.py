"""Pytest configuration and shared fixtures for the cursorpage tests."""

import logging
from typing import List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cursorpage.config import Settings, get_settings
from cursorpage.main import create_app
from cursorpage.models.comments import Comment
from cursorpage.store import InMemoryCommentStore, get_comment_store, sample_comments


# Reduce log noise during tests
logging.getLogger("cursorpage").setLevel(logging.WARNING)


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by the test application."""
    return Settings(
        log_level="ERROR",
        default_page_size=2,
        max_page_size=50,
        default_order="created_at",
        default_direction=-1,
        prefetch=True,
        strict_cursors=True
    )


@pytest.fixture
def comments() -> List[Comment]:
    return sample_comments()


@pytest.fixture
def store(comments: List[Comment]) -> InMemoryCommentStore:
    return InMemoryCommentStore(comments)


@pytest.fixture
def app(test_settings: Settings, store: InMemoryCommentStore) -> FastAPI:
    """Create test app with settings and store overridden."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_comment_store] = lambda: store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)
