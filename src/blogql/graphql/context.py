"""
Per-request GraphQL context helpers
"""

import re
from typing import Any

import strawberry
from fastapi import Request

from ..logging import get_logger
from ..store import BlogStore

logger = get_logger(__name__)

# ASCII decimal only; int() alone would also accept "0_2" and non-ASCII digits
ENTITY_ID_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


async def get_context(request: Request) -> dict[str, Any]:
    """Get the context for GraphQL resolvers."""
    return {
        "request": request,
        "store": request.app.state.store,
    }


def get_store_from_info(info: strawberry.Info) -> BlogStore:
    """
    Extract the entity store from a GraphQL info object.

    Raises:
        RuntimeError: If the context carries no store
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise RuntimeError("Entity store is not configured")
    return store


def parse_entity_id(raw: str | int) -> int | None:
    """Parse a GraphQL ID into a table key; None when it is not an integer."""
    if isinstance(raw, int):
        return raw
    text = str(raw)
    if not ENTITY_ID_PATTERN.fullmatch(text):
        return None
    return int(text)
