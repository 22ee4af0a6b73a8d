"""
Record types held by the entity store
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """An author record. Immutable after creation."""

    id: int
    first_name: str
    last_name: str


@dataclass(frozen=True)
class Post:
    """A post record.

    Records are immutable snapshots; the store replaces a post wholesale when
    its vote counter changes.
    """

    id: int
    author_id: int
    title: str
    votes: int = 0
