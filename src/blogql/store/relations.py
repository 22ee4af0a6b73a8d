"""
Relationship traversal between authors and posts over the ``author_id`` key.
"""

from ..errors import InvalidReferenceError
from .entity_store import BlogStore
from .models import Author, Post


def posts_by_author(store: BlogStore, author: Author) -> list[Post]:
    """
    Return the posts written by ``author`` in insertion order.

    Uses the store's author index rather than scanning every post, so
    resolving posts for N authors costs O(total posts) instead of O(N * posts).
    """
    posts = []
    for post_id in store.post_ids_for_author(author.id):
        post = store.get_post(post_id)
        if post is not None:
            posts.append(post)
    return posts


def author_of_post(store: BlogStore, post: Post) -> Author:
    """
    Return the author referenced by ``post``.

    Raises:
        InvalidReferenceError: If the post's author id has no matching author
    """
    author = store.get_author(post.author_id)
    if author is None:
        raise InvalidReferenceError(post.id, post.author_id)
    return author
