"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.post import Post


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="upvotePost")
    async def upvote_post(self, info: strawberry.Info, post_id: strawberry.ID) -> Post | None:
        """Add one vote to a post."""
        from ..resolvers.post import upvote_post

        return await upvote_post(info, post_id)
