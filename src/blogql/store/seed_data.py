"""
Seed data for populating the entity store at process start.

The built-in seed is the fixed dataset the API ships with. A JSON fixture
with the same shape can replace it via ``BLOGQL_SEED_PATH``:

    {
      "authors": [{"id": 1, "firstName": "Tom", "lastName": "Coleman"}],
      "posts": [{"id": 1, "authorId": 1, "title": "...", "votes": 2}]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..logging import get_logger
from .entity_store import BlogStore
from .models import Author, Post

logger = get_logger(__name__)

DEFAULT_AUTHORS: tuple[Author, ...] = (
    Author(id=1, first_name="Tom", last_name="Coleman"),
    Author(id=2, first_name="Sashko", last_name="Stubailo"),
    Author(id=3, first_name="Mikhail", last_name="Novikov"),
)

DEFAULT_POSTS: tuple[Post, ...] = (
    Post(id=1, author_id=1, title="Introduction to GraphQL", votes=2),
    Post(id=2, author_id=2, title="Welcome to Meteor", votes=3),
    Post(id=3, author_id=2, title="Advanced GraphQL", votes=1),
    Post(id=4, author_id=3, title="Launchpad is Cool", votes=7),
)


def default_seed() -> BlogStore:
    """Build a fresh store holding the built-in authors and posts."""
    return BlogStore(DEFAULT_AUTHORS, DEFAULT_POSTS)


def _author_from_dict(data: dict[str, Any]) -> Author:
    return Author(
        id=int(data["id"]),
        first_name=str(data["firstName"]),
        last_name=str(data["lastName"]),
    )


def _post_from_dict(data: dict[str, Any]) -> Post:
    votes = int(data.get("votes", 0))
    if votes < 0:
        raise ValueError(f"Post {data['id']} has negative votes: {votes}")
    return Post(
        id=int(data["id"]),
        author_id=int(data["authorId"]),
        title=str(data["title"]),
        votes=votes,
    )


def load_seed(path: str | Path) -> BlogStore:
    """
    Build a store from a JSON fixture file.

    Args:
        path: Path to a JSON document with ``authors`` and ``posts`` lists

    Returns:
        A new BlogStore populated from the file

    Raises:
        ValueError: If the document is malformed or contains duplicate ids
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
        authors = [_author_from_dict(item) for item in document.get("authors", [])]
        posts = [_post_from_dict(item) for item in document.get("posts", [])]
    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e

    logger.info("Loaded seed file", path=str(path), authors=len(authors), posts=len(posts))
    return BlogStore(authors, posts)


def build_store(seed_path: str | None = None, validate_references: bool = True) -> BlogStore:
    """
    Build the process-wide store from the configured seed.

    Args:
        seed_path: JSON fixture to load; the built-in seed is used when None
        validate_references: Reject posts whose author does not exist
    """
    store = load_seed(seed_path) if seed_path else default_seed()
    if validate_references:
        store.validate_references()
    return store
