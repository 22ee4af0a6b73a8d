"""
In-memory entity store for authors and posts
"""

from .entity_store import BlogStore, EntityTable
from .models import Author, Post
from .relations import author_of_post, posts_by_author
from .seed_data import build_store, default_seed, load_seed

__all__ = [
    "Author",
    "BlogStore",
    "EntityTable",
    "Post",
    "author_of_post",
    "build_store",
    "default_seed",
    "load_seed",
    "posts_by_author",
]
