"""Tests for hateblo.models.entry."""

from __future__ import annotations

import pydantic
import pytest

from hateblo.models.entry import Content, ContentType, Entry
from hateblo.models.hatena_datetime import HatenaDateTime


class TestNewEntry:
    """Tests for entries created by the caller."""

    def test_empty_entry(self) -> None:
        """A new entry has no server-assigned fields."""
        entry = Entry()
        assert entry.id is None
        assert entry.member_uri is None
        assert entry.publication_time is None
        assert entry.edit_time is None
        assert entry.summary is None
        assert entry.formatted_content is None
        assert entry.update_time is None
        assert entry.categories == set()
        assert entry.is_draft is False

    def test_content_type_unknown_until_loaded(self) -> None:
        entry = Entry(content=Content(text="body"))
        assert entry.content.type is ContentType.UNKNOWN

    def test_writable_fields(self) -> None:
        entry = Entry()
        entry.title = "Title"
        entry.update_time = HatenaDateTime(2020, 1, 1)
        entry.categories.add("diary")
        entry.content.text = "Body"
        entry.is_draft = True
        assert entry.title == "Title"
        assert entry.categories == {"diary"}
        assert entry.content.text == "Body"

    def test_categories_are_unique(self) -> None:
        entry = Entry(categories={"a", "b"})
        entry.categories.add("a")
        assert entry.categories == {"a", "b"}

    def test_server_fields_read_only(self) -> None:
        entry = Entry()
        with pytest.raises(AttributeError):
            entry.id = "123"  # type: ignore[misc]

    def test_content_type_read_only(self) -> None:
        with pytest.raises(AttributeError):
            Content().type = ContentType.HTML  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Entry(author="alice")  # type: ignore[call-arg]

    def test_assignment_validated(self) -> None:
        entry = Entry()
        with pytest.raises(pydantic.ValidationError):
            entry.update_time = "2020-01-01T00:00:00Z"  # type: ignore[assignment]


class TestRestoredEntry:
    """Tests for Entry.restore."""

    def test_restore_populates_every_field(self) -> None:
        updated = HatenaDateTime(2020, 1, 1)
        entry = Entry.restore(
            id="123",
            member_uri="https://blog.hatena.ne.jp/a/b/atom/entry/123",
            title="Title",
            update_time=updated,
            publication_time=HatenaDateTime(2019, 12, 31),
            edit_time=HatenaDateTime(2020, 1, 2),
            categories={"x"},
            summary="Sum",
            content_type=ContentType.HATENA_SYNTAX,
            content_text="*body",
            formatted_content="<p>body</p>",
            is_draft=True,
        )
        assert entry.id == "123"
        assert entry.member_uri.endswith("/123")
        assert entry.update_time == updated
        assert entry.publication_time == HatenaDateTime(2019, 12, 31)
        assert entry.edit_time == HatenaDateTime(2020, 1, 2)
        assert entry.summary == "Sum"
        assert entry.content.type is ContentType.HATENA_SYNTAX
        assert entry.content.text == "*body"
        assert entry.formatted_content == "<p>body</p>"
        assert entry.is_draft is True
