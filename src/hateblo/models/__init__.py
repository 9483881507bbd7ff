"""Domain models: entries and the wire date-time type."""

from hateblo.models.entry import Content, ContentType, Entry
from hateblo.models.hatena_datetime import HatenaDateTime

__all__ = [
    "Content",
    "ContentType",
    "Entry",
    "HatenaDateTime",
]
