"""
Unit tests for the in-memory entity tables
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from blogql.errors import InvalidReferenceError
from blogql.store import Author, BlogStore, EntityTable, Post


class TestEntityTable:
    """Tests for EntityTable."""

    def test_get_returns_record(self):
        table = EntityTable("Author", [Author(id=1, first_name="Tom", last_name="Coleman")])

        assert table.get(1) == Author(id=1, first_name="Tom", last_name="Coleman")

    def test_get_missing_returns_none(self):
        table = EntityTable("Author", [Author(id=1, first_name="Tom", last_name="Coleman")])

        assert table.get(2) is None

    def test_list_all_preserves_insertion_order(self):
        table = EntityTable(
            "Post",
            [
                Post(id=3, author_id=1, title="c"),
                Post(id=1, author_id=1, title="a"),
                Post(id=2, author_id=1, title="b"),
            ],
        )

        assert [post.id for post in table.list_all()] == [3, 1, 2]

    def test_list_all_returns_fresh_list(self):
        table = EntityTable("Post", [Post(id=1, author_id=1, title="a")])

        first = table.list_all()
        first.clear()

        assert len(table.list_all()) == 1

    def test_duplicate_id_rejected(self):
        with pytest.raises(ValueError, match="Duplicate Post id 1"):
            EntityTable(
                "Post",
                [Post(id=1, author_id=1, title="a"), Post(id=1, author_id=2, title="b")],
            )

    def test_replace_unknown_record_raises(self):
        table = EntityTable("Post", [Post(id=1, author_id=1, title="a")])

        with pytest.raises(KeyError):
            table.replace(Post(id=2, author_id=1, title="b"))

    def test_len_and_contains(self):
        table = EntityTable("Post", [Post(id=1, author_id=1, title="a")])

        assert len(table) == 1
        assert 1 in table
        assert 2 not in table


class TestBlogStore:
    """Tests for BlogStore lookups and vote updates."""

    def test_seed_sizes(self, store):
        assert len(store.authors) == 3
        assert len(store.posts) == 4

    @pytest.mark.parametrize("author_id", [1, 2, 3])
    def test_get_author_by_id(self, store, author_id):
        author = store.get_author(author_id)

        assert author is not None
        assert author.id == author_id

    def test_post_ids_for_author(self, store):
        assert store.post_ids_for_author(2) == [2, 3]
        assert store.post_ids_for_author(42) == []

    def test_upvote_increments_by_one(self, store):
        updated = store.upvote(1)

        assert updated is not None
        assert updated.votes == 3
        assert store.get_post(1).votes == 3

    def test_upvote_keeps_other_fields(self, store):
        updated = store.upvote(4)

        assert updated == Post(id=4, author_id=3, title="Launchpad is Cool", votes=8)

    def test_upvote_keeps_listing_order(self, store):
        store.upvote(2)

        assert [post.id for post in store.list_posts()] == [1, 2, 3, 4]

    def test_upvote_missing_post_returns_none(self, store):
        assert store.upvote(5) is None
        assert [post.votes for post in store.list_posts()] == [2, 3, 1, 7]

    def test_upvote_n_times(self, store):
        for _ in range(10):
            store.upvote(3)

        assert store.get_post(3).votes == 11

    def test_concurrent_upvotes_are_not_lost(self, store):
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: store.upvote(1), range(1000)))

        assert store.get_post(1).votes == 1002

    def test_validate_references_accepts_seed(self, store):
        store.validate_references()

    def test_validate_references_rejects_dangling_author(self, dangling_store):
        with pytest.raises(InvalidReferenceError) as exc_info:
            dangling_store.validate_references()

        assert exc_info.value.post_id == 2
        assert exc_info.value.author_id == 99

    def test_find_dangling_references(self, dangling_store):
        errors = dangling_store.find_dangling_references()

        assert [(e.post_id, e.author_id) for e in errors] == [(2, 99)]

    def test_duplicate_author_ids_rejected(self):
        with pytest.raises(ValueError):
            BlogStore(
                authors=[
                    Author(id=1, first_name="Tom", last_name="Coleman"),
                    Author(id=1, first_name="Sashko", last_name="Stubailo"),
                ]
            )
