"""
In-memory entity tables for authors and posts.
"""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar

from ..errors import InvalidReferenceError
from ..logging import get_logger
from .models import Author, Post

logger = get_logger(__name__)


class _Identified(Protocol):
    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=_Identified)


class EntityTable(Generic[T]):
    """
    Insertion-ordered table of records keyed by their ``id``.

    ``get`` returns None for an absent id. Stored records are never None, so
    None unambiguously means "not found".
    """

    def __init__(self, entity_type: str, records: Iterable[T] = ()):
        self.entity_type = entity_type
        self._rows: dict[int, T] = {}
        for record in records:
            self.insert(record)

    def insert(self, record: T) -> None:
        """
        Add a record to the table.

        Raises:
            ValueError: If a record with the same id is already present
        """
        if record.id in self._rows:
            raise ValueError(f"Duplicate {self.entity_type} id {record.id}")
        self._rows[record.id] = record

    def replace(self, record: T) -> None:
        """Swap in a new version of an existing record, keeping its position."""
        if record.id not in self._rows:
            raise KeyError(record.id)
        self._rows[record.id] = record

    def get(self, id: int) -> T | None:
        return self._rows.get(id)

    def list_all(self) -> list[T]:
        """Return all records in insertion order as a fresh list."""
        return list(self._rows.values())

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, id: object) -> bool:
        return id in self._rows


class BlogStore:
    """
    The authoritative author and post tables for one process.

    Besides the two tables the store keeps a secondary index from author id
    to that author's post ids, and one lock per post serializing vote
    updates.
    """

    def __init__(self, authors: Iterable[Author] = (), posts: Iterable[Post] = ()):
        self.authors: EntityTable[Author] = EntityTable("Author", authors)
        self.posts: EntityTable[Post] = EntityTable("Post", posts)

        self._post_ids_by_author: dict[int, list[int]] = {}
        self._vote_locks: dict[int, threading.Lock] = {}
        for post in self.posts.list_all():
            self._post_ids_by_author.setdefault(post.author_id, []).append(post.id)
            self._vote_locks[post.id] = threading.Lock()

        logger.debug(
            "Entity store initialized",
            authors=len(self.authors),
            posts=len(self.posts),
        )

    def get_author(self, author_id: int) -> Author | None:
        return self.authors.get(author_id)

    def get_post(self, post_id: int) -> Post | None:
        return self.posts.get(post_id)

    def list_authors(self) -> list[Author]:
        return self.authors.list_all()

    def list_posts(self) -> list[Post]:
        return self.posts.list_all()

    def post_ids_for_author(self, author_id: int) -> list[int]:
        """Post ids referencing ``author_id``, in insertion order."""
        return list(self._post_ids_by_author.get(author_id, ()))

    def upvote(self, post_id: int) -> Post | None:
        """
        Increment a post's vote counter by exactly one.

        Returns:
            The updated post, or None if no post has that id
        """
        lock = self._vote_locks.get(post_id)
        if lock is None:
            return None

        with lock:
            post = self.posts.get(post_id)
            if post is None:
                return None
            updated = dataclasses.replace(post, votes=post.votes + 1)
            self.posts.replace(updated)

        logger.debug("Post upvoted", post_id=post_id, votes=updated.votes)
        return updated

    def find_dangling_references(self) -> list[InvalidReferenceError]:
        """Return one error per post whose author id has no matching author."""
        return [
            InvalidReferenceError(post.id, post.author_id)
            for post in self.posts.list_all()
            if post.author_id not in self.authors
        ]

    def validate_references(self) -> None:
        """
        Reject a store containing posts that reference missing authors.

        Raises:
            InvalidReferenceError: For the first dangling reference found
        """
        errors = self.find_dangling_references()
        if errors:
            logger.error(
                "Dangling author references in store",
                references=[
                    {"post_id": e.post_id, "author_id": e.author_id} for e in errors
                ],
            )
            raise errors[0]
