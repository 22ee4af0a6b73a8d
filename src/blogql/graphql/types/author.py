"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import models

if TYPE_CHECKING:
    from .post import Post


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str

    @strawberry.field(description="The list of posts by this author")
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")] | None] | None:  # noqa: E501
        from ..resolvers.author import resolve_author_posts

        return await resolve_author_posts(self, info)

    @classmethod
    def from_record(cls, record: models.Author) -> "Author":
        return cls(
            id=strawberry.ID(str(record.id)),
            first_name=record.first_name,
            last_name=record.last_name,
        )
