from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import posts_by_author
from ..context import get_store_from_info, parse_entity_id

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.post import Post

logger = get_logger(__name__)


# Query resolvers
async def resolve_author_by_id(info: strawberry.Info, id: strawberry.ID) -> Author:
    """
    Resolve an author by ID.

    Raises:
        NotFoundError: If no author has this ID
    """
    store = get_store_from_info(info)

    author_id = parse_entity_id(id)
    record = store.get_author(author_id) if author_id is not None else None
    if record is None:
        logger.info("Author not found", author_id=str(id))
        raise NotFoundError("Author", id)

    from ..types.author import Author as AuthorType

    return AuthorType.from_record(record)


# Field resolvers
async def resolve_author_posts(author: Author, info: strawberry.Info) -> list[Post]:
    """Resolve the posts written by an author, in insertion order."""
    store = get_store_from_info(info)

    record = store.get_author(int(author.id))
    if record is None:
        # Author vanished between the parent and child resolvers
        raise NotFoundError("Author", author.id)

    from ..types.post import Post as PostType

    return [PostType.from_record(post) for post in posts_by_author(store, record)]
