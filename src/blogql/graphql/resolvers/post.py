from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import InvalidReferenceError, NotFoundError
from ...logging import get_logger
from ...store import author_of_post, models
from ..context import get_store_from_info, parse_entity_id

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.post import Post

logger = get_logger(__name__)


# Query resolvers
async def resolve_posts(info: strawberry.Info) -> list[Post]:
    """Resolve every post in insertion order."""
    store = get_store_from_info(info)

    from ..types.post import Post as PostType

    return [PostType.from_record(record) for record in store.list_posts()]


# Field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> Author:
    """
    Resolve the author of a post.

    Raises:
        InvalidReferenceError: If the post's author does not exist
    """
    store = get_store_from_info(info)

    record = models.Post(
        id=int(post.id), author_id=post.author_id, title=post.title, votes=post.votes
    )
    try:
        author = author_of_post(store, record)
    except InvalidReferenceError as e:
        logger.warning(
            "Post author could not be resolved",
            post_id=e.post_id,
            author_id=e.author_id,
        )
        raise

    from ..types.author import Author as AuthorType

    return AuthorType.from_record(author)


# Mutations
async def upvote_post(info: strawberry.Info, post_id: strawberry.ID) -> Post:
    """
    Add one vote to a post.

    Raises:
        NotFoundError: If no post has this ID
    """
    store = get_store_from_info(info)

    key = parse_entity_id(post_id)
    updated = store.upvote(key) if key is not None else None
    if updated is None:
        logger.info("Post not found for upvote", post_id=str(post_id))
        raise NotFoundError("Post", post_id)

    logger.info("Post upvoted", post_id=updated.id, votes=updated.votes)

    from ..types.post import Post as PostType

    return PostType.from_record(updated)
