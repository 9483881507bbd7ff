"""Tests for hateblo.atom.feed - collection pages and category documents."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hateblo.atom.feed import Feed, load_categories, load_feed
from hateblo.core.exceptions import FatalProtocolViolation, ProtocolError

NEXT_URI = "https://blog.hatena.ne.jp/alice/alice.hatenablog.com/atom/entry?page=1577836800"


class TestLoadFeed:
    """Tests for load_feed."""

    def test_entries_in_document_order(
        self, feed_xml: Callable[..., str], entry_xml: Callable[..., str]
    ) -> None:
        document = feed_xml(
            [entry_xml("3", root=False), entry_xml("1", root=False), entry_xml("2", root=False)],
            next_uri=NEXT_URI,
        )
        feed = load_feed(document)
        assert [e.id for e in feed] == ["3", "1", "2"]
        assert len(feed) == 3

    def test_next_link(self, feed_xml: Callable[..., str], entry_xml: Callable[..., str]) -> None:
        feed = load_feed(feed_xml([entry_xml(root=False)], next_uri=NEXT_URI))
        assert feed.next_request_uri == NEXT_URI
        assert feed.is_last is False

    def test_last_page(self, feed_xml: Callable[..., str], entry_xml: Callable[..., str]) -> None:
        """The 'first' link is not mistaken for a next link."""
        feed = load_feed(feed_xml([entry_xml(root=False)]))
        assert feed.next_request_uri is None
        assert feed.is_last is True

    def test_empty_page(self, feed_xml: Callable[..., str]) -> None:
        feed = load_feed(feed_xml([]))
        assert feed.entries == ()
        assert feed.is_last

    def test_large_page(self, feed_xml: Callable[..., str], entry_xml: Callable[..., str]) -> None:
        """Any page size is accepted."""
        feed = load_feed(feed_xml([entry_xml(str(i), root=False) for i in range(25)]))
        assert len(feed) == 25

    def test_two_next_links(self, feed_xml: Callable[..., str]) -> None:
        document = feed_xml([], next_uri=NEXT_URI).replace(
            "<title>", f'<link rel="next" href="{NEXT_URI}2"/><title>'
        )
        with pytest.raises(ProtocolError):
            load_feed(document)

    def test_next_link_without_href(self, feed_xml: Callable[..., str]) -> None:
        document = feed_xml([]).replace("<title>", '<link rel="next"/><title>')
        with pytest.raises(ProtocolError):
            load_feed(document)

    def test_bad_entry_fails_whole_page(
        self, feed_xml: Callable[..., str], entry_xml: Callable[..., str]
    ) -> None:
        document = feed_xml([entry_xml("1", root=False), entry_xml("2", root=False, updated="bad")])
        with pytest.raises(ProtocolError):
            load_feed(document)

    def test_unknown_content_type_propagates(
        self, feed_xml: Callable[..., str], entry_xml: Callable[..., str]
    ) -> None:
        document = feed_xml([entry_xml(root=False, content_type="application/json")])
        with pytest.raises(FatalProtocolViolation):
            load_feed(document)

    def test_wrong_root(self, entry_xml: Callable[..., str]) -> None:
        with pytest.raises(ProtocolError):
            load_feed(entry_xml())

    def test_not_xml(self) -> None:
        with pytest.raises(ProtocolError):
            load_feed(b"<html><body>Service Unavailable")


class TestFeed:
    """Tests for the Feed value."""

    def test_defaults(self) -> None:
        feed = Feed()
        assert len(feed) == 0
        assert feed.is_last

    def test_immutable(self) -> None:
        feed = Feed()
        with pytest.raises(AttributeError):
            feed.next_request_uri = NEXT_URI  # type: ignore[misc]


class TestLoadCategories:
    """Tests for load_categories."""

    def test_document_order(self, categories_xml: Callable[..., str]) -> None:
        assert load_categories(categories_xml(["python", "diary", "atom"])) == [
            "python",
            "diary",
            "atom",
        ]

    def test_duplicates_kept(self, categories_xml: Callable[..., str]) -> None:
        assert load_categories(categories_xml(["a", "a"])) == ["a", "a"]

    def test_empty(self, categories_xml: Callable[..., str]) -> None:
        assert load_categories(categories_xml([])) == []

    def test_missing_term(self, categories_xml: Callable[..., str]) -> None:
        document = categories_xml(["a"]).replace('term="a"', 'label="a"')
        with pytest.raises(ProtocolError):
            load_categories(document)

    def test_malformed(self) -> None:
        with pytest.raises(ProtocolError):
            load_categories("<app:categories")
