"""
blogql
GraphQL API over in-memory authors and posts
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
