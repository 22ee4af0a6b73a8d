"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import models

if TYPE_CHECKING:
    from .author import Author


async def resolve_author(
    root, info: strawberry.Info
) -> Annotated["Author", strawberry.lazy(".author")]:
    from ..resolvers.post import resolve_post_author

    return await resolve_post_author(root, info)


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str
    # SDL order: id, title, author, votes
    author: Annotated["Author", strawberry.lazy(".author")] = strawberry.field(
        resolver=resolve_author, description="Get the author of this post."
    )
    votes: int
    author_id: strawberry.Private[int]

    @classmethod
    def from_record(cls, record: models.Post) -> "Post":
        return cls(
            id=strawberry.ID(str(record.id)),
            title=record.title,
            votes=record.votes,
            author_id=record.author_id,
        )
