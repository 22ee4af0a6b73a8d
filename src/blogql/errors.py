"""
Domain errors surfaced through GraphQL resolvers.

graphql-core copies an ``extensions`` dict found on the original exception
onto the resulting ``GraphQLError``, so every error here carries a stable
``code`` that clients can match on instead of parsing messages.
"""

from typing import Any


class BlogError(Exception):
    """Base exception for blog domain errors."""

    code = "BLOG_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.extensions: dict[str, Any] = {"code": self.code, **details}


class NotFoundError(BlogError):
    """Raised when an entity id is absent from its table."""

    code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with ID {entity_id} not found.",
            entityType=entity_type,
            id=str(entity_id),
        )


class InvalidReferenceError(BlogError):
    """Raised when a post references an author that does not exist."""

    code = "INVALID_REFERENCE"

    def __init__(self, post_id: int, author_id: int):
        self.post_id = post_id
        self.author_id = author_id
        super().__init__(
            f"Post {post_id} references missing author {author_id}.",
            postId=str(post_id),
            authorId=str(author_id),
        )
