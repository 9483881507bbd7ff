"""Blog entry models.

An ``Entry`` is either created empty by the caller (for a new post) or
restored in full from a server response. Server-assigned fields are exposed
as read-only properties.

Example:
    >>> from hateblo.models.entry import Entry, ContentType
    >>> entry = Entry(title="Hello", categories={"diary"})
    >>> entry.content.text = "First post"
    >>> entry.id is None
    True
    >>> entry.content.type
    <ContentType.UNKNOWN: 'unknown'>
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from hateblo.models.hatena_datetime import HatenaDateTime


class ContentType(str, Enum):
    """Editing mode of an entry body.

    ``UNKNOWN`` until the entry has been returned by the server.

    Example:
        >>> ContentType.MARKDOWN.value
        'markdown'
    """

    UNKNOWN = "unknown"
    HTML = "html"  # WYSIWYG editor
    HATENA_SYNTAX = "hatena_syntax"
    MARKDOWN = "markdown"


class HatebloModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )


class Content(HatebloModel):
    """Body of an entry."""

    text: str = Field(default="", description="Raw body in the entry's editing mode")

    _type: ContentType = PrivateAttr(default=ContentType.UNKNOWN)

    @property
    def type(self) -> ContentType:
        """Editing mode reported by the server."""
        return self._type


class Entry(HatebloModel):
    """A single blog post.

    Writable fields are plain attributes. ``update_time`` left as ``None``
    lets the server assign the time on post/update.
    """

    title: str = ""
    update_time: HatenaDateTime | None = None
    categories: set[str] = Field(default_factory=set)
    content: Content = Field(default_factory=Content)
    is_draft: bool = False

    _id: str | None = PrivateAttr(default=None)
    _member_uri: str | None = PrivateAttr(default=None)
    _publication_time: HatenaDateTime | None = PrivateAttr(default=None)
    _edit_time: HatenaDateTime | None = PrivateAttr(default=None)
    _summary: str | None = PrivateAttr(default=None)
    _formatted_content: str | None = PrivateAttr(default=None)

    @classmethod
    def restore(
        cls,
        *,
        id: str,
        member_uri: str,
        title: str,
        update_time: HatenaDateTime,
        publication_time: HatenaDateTime,
        edit_time: HatenaDateTime,
        categories: set[str],
        summary: str,
        content_type: ContentType,
        content_text: str,
        formatted_content: str,
        is_draft: bool,
    ) -> Entry:
        """Build a fully populated entry from decoded server fields."""
        content = Content(text=content_text)
        content._type = content_type
        entry = cls(
            title=title,
            update_time=update_time,
            categories=categories,
            content=content,
            is_draft=is_draft,
        )
        entry._id = id
        entry._member_uri = member_uri
        entry._publication_time = publication_time
        entry._edit_time = edit_time
        entry._summary = summary
        entry._formatted_content = formatted_content
        return entry

    @property
    def id(self) -> str | None:
        """Entry ID, known once the entry has been loaded from the server."""
        return self._id

    @property
    def member_uri(self) -> str | None:
        """Edit URI of the entry, known once loaded."""
        return self._member_uri

    @property
    def publication_time(self) -> HatenaDateTime | None:
        return self._publication_time

    @property
    def edit_time(self) -> HatenaDateTime | None:
        return self._edit_time

    @property
    def summary(self) -> str | None:
        return self._summary

    @property
    def formatted_content(self) -> str | None:
        """Rendered HTML body."""
        return self._formatted_content
