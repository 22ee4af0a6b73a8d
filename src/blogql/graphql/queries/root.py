"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.post import Post


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def posts(self, info: strawberry.Info) -> list[Post | None] | None:
        """Get all posts."""
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info)

    @strawberry.field
    async def author(self, info: strawberry.Info, id: strawberry.ID) -> Author | None:
        """Get an author by ID."""
        from ..resolvers.author import resolve_author_by_id

        return await resolve_author_by_id(info, id)
