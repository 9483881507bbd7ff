"""Feed (collection page) and category document codec.

Example:
    >>> from hateblo.atom.feed import load_categories
    >>> xml = (
    ...     '<app:categories xmlns:app="http://www.w3.org/2007/app" '
    ...     'xmlns:atom="http://www.w3.org/2005/Atom">'
    ...     '<atom:category term="diary"/><atom:category term="python"/>'
    ...     '</app:categories>'
    ... )
    >>> load_categories(xml)
    ['diary', 'python']
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field

from hateblo.atom.entry import decode_entry
from hateblo.atom.namespaces import atom, parse_xml
from hateblo.core.exceptions import ProtocolError
from hateblo.models.entry import Entry


@dataclass(frozen=True)
class Feed:
    """One page of a collection.

    Attributes:
        entries: Entries in document order.
        next_request_uri: URI of the following page, ``None`` on the last page.
    """

    entries: tuple[Entry, ...] = field(default_factory=tuple)
    next_request_uri: str | None = None

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_last(self) -> bool:
        """True when there is no following page."""
        return self.next_request_uri is None


def decode_feed(element: ET.Element) -> Feed:
    """Decode a ``feed`` element into a ``Feed``.

    Any number of entries is accepted; the page size of the service is not
    fixed.

    Raises:
        ProtocolError: If an entry or the next link is malformed.
        FatalProtocolViolation: Propagated from ``decode_entry``.
    """
    next_links = [link for link in element.findall(atom("link")) if link.get("rel") == "next"]
    if len(next_links) > 1:
        raise ProtocolError(f"Expected at most one next link, found {len(next_links)}")

    next_request_uri = None
    if next_links:
        next_request_uri = next_links[0].get("href")
        if not next_request_uri:
            raise ProtocolError("Next link has no href")

    entries = tuple(decode_entry(e) for e in element.findall(atom("entry")))
    return Feed(entries=entries, next_request_uri=next_request_uri)


def decode_categories(element: ET.Element) -> list[str]:
    """All ``category/@term`` values in document order, duplicates kept."""
    terms = []
    for category in element.findall(atom("category")):
        term = category.get("term")
        if term is None:
            raise ProtocolError("Category element has no term attribute")
        terms.append(term)
    return terms


def load_feed(body: bytes | str) -> Feed:
    """Decode a collection response body."""
    root = parse_xml(body)
    if root.tag != atom("feed"):
        raise ProtocolError(f"Expected an Atom feed document, got {root.tag}")
    return decode_feed(root)


def load_categories(body: bytes | str) -> list[str]:
    """Decode a category document response body."""
    return decode_categories(parse_xml(body))
