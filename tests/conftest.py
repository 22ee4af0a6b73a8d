"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from blogql.store import Author, BlogStore, Post, default_seed


@pytest.fixture
def store() -> BlogStore:
    """A fresh store holding the built-in seed."""
    return default_seed()


@pytest.fixture
def dangling_store() -> BlogStore:
    """A store where post 2 references an author that does not exist."""
    return BlogStore(
        authors=[Author(id=1, first_name="Tom", last_name="Coleman")],
        posts=[
            Post(id=1, author_id=1, title="Introduction to GraphQL", votes=2),
            Post(id=2, author_id=99, title="Orphaned", votes=0),
        ],
    )


@pytest.fixture
def mock_info(store: BlogStore):
    """Create a mock GraphQL info object carrying the store in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"store": store}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
