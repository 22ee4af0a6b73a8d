"""
Unit tests for author/post relationship traversal
"""

import pytest

from blogql.errors import InvalidReferenceError
from blogql.store import Author, BlogStore, Post, author_of_post, posts_by_author


@pytest.mark.parametrize(
    "author_id,expected_titles",
    [
        (1, ["Introduction to GraphQL"]),
        (2, ["Welcome to Meteor", "Advanced GraphQL"]),
        (3, ["Launchpad is Cool"]),
    ],
)
def test_posts_by_author(store, author_id, expected_titles):
    author = store.get_author(author_id)

    posts = posts_by_author(store, author)

    assert [post.title for post in posts] == expected_titles
    assert all(post.author_id == author_id for post in posts)


def test_posts_by_author_without_posts():
    store = BlogStore(authors=[Author(id=7, first_name="Ada", last_name="Lovelace")])

    assert posts_by_author(store, store.get_author(7)) == []


def test_posts_by_author_reflects_votes(store):
    store.upvote(3)

    posts = posts_by_author(store, store.get_author(2))

    assert [post.votes for post in posts] == [3, 2]


def test_posts_by_author_matches_full_scan(store):
    for author in store.list_authors():
        scanned = [post for post in store.list_posts() if post.author_id == author.id]
        assert posts_by_author(store, author) == scanned


@pytest.mark.parametrize("post_id", [1, 2, 3, 4])
def test_author_of_post(store, post_id):
    post = store.get_post(post_id)

    author = author_of_post(store, post)

    assert author.id == post.author_id


def test_author_of_post_dangling_reference():
    store = BlogStore(posts=[Post(id=1, author_id=5, title="Orphaned")])

    with pytest.raises(InvalidReferenceError) as exc_info:
        author_of_post(store, store.get_post(1))

    assert exc_info.value.extensions["code"] == "INVALID_REFERENCE"
