"""Entry codec.

Converts a single ``Entry`` to the AtomPub request document and back from
an ``entry`` element of a response.

Example:
    >>> from hateblo.atom.entry import encode_entry
    >>> from hateblo.models.entry import Entry
    >>> entry = Entry(title="Hello")
    >>> b"<title>Hello</title>" in encode_entry(entry)
    True
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from hateblo.atom.namespaces import ATOM_NS, app, atom, hatena, parse_xml
from hateblo.core.exceptions import FormatError, ProtocolError, RangeError, report_bug
from hateblo.models.entry import ContentType, Entry
from hateblo.models.hatena_datetime import HatenaDateTime

_MEMBER_URI = re.compile(r"/[^/]+/[^/]+/atom/entry/(?P<entry_id>[^/?#]+)$")

_CONTENT_TYPES = {
    "text/html": ContentType.HTML,
    "text/x-hatena-syntax": ContentType.HATENA_SYNTAX,
    "text/x-markdown": ContentType.MARKDOWN,
}

_DRAFT_TOKENS = {"yes": True, "no": False}


def encode_entry(entry: Entry) -> bytes:
    """Serialize an entry into the document sent on post and update.

    The body is always sent as ``text/plain``; the server keeps the blog's
    editing mode. ``updated`` is omitted when ``update_time`` is unset so the
    server assigns the time. Categories are written sorted.

    Returns:
        UTF-8 encoded XML document.
    """
    # Atom is the default namespace, so its elements are written unqualified.
    root = ET.Element("entry", {"xmlns": ATOM_NS})
    ET.SubElement(root, "title").text = entry.title

    content = ET.SubElement(root, "content", {"type": "text/plain"})
    content.text = entry.content.text

    if entry.update_time is not None:
        ET.SubElement(root, "updated").text = entry.update_time.format()

    for term in sorted(entry.categories):
        ET.SubElement(root, "category", {"term": term})

    control = ET.SubElement(root, app("control"))
    ET.SubElement(control, app("draft")).text = "yes" if entry.is_draft else "no"

    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def decode_entry(element: ET.Element) -> Entry:
    """Decode an ``entry`` element from a response.

    Every field is decoded before the ``Entry`` is built, so a failure never
    leaves a half-populated entry behind.

    Raises:
        ProtocolError: If an expected element is missing, the edit link has
            an unexpected shape, or a date cannot be parsed.
        FatalProtocolViolation: If the content type or draft token is not
            one this client knows.
    """
    member_uri = _edit_link(element)
    match = _MEMBER_URI.search(member_uri)
    if match is None:
        raise ProtocolError(f"Edit link does not look like an entry URI: {member_uri}")

    content = _required(element, atom("content"))
    content_type = _required_attr(content, "type")
    if content_type not in _CONTENT_TYPES:
        raise report_bug(f"unknown content type {content_type!r}")

    draft_token = _text(_required(_required(element, app("control")), app("draft")))
    if draft_token not in _DRAFT_TOKENS:
        raise report_bug(f"unknown draft token {draft_token!r}")

    return Entry.restore(
        id=match["entry_id"],
        member_uri=member_uri,
        title=_text(_required(element, atom("title"))),
        update_time=_datetime(element, atom("updated")),
        publication_time=_datetime(element, atom("published")),
        edit_time=_datetime(element, app("edited")),
        categories={_required_attr(c, "term") for c in element.findall(atom("category"))},
        summary=_text(_required(element, atom("summary"))),
        content_type=_CONTENT_TYPES[content_type],
        content_text=_text(content),
        formatted_content=_text(_required(element, hatena("formatted-content"))),
        is_draft=_DRAFT_TOKENS[draft_token],
    )


def load_entry(body: bytes | str) -> Entry:
    """Decode an entry response body."""
    root = parse_xml(body)
    if root.tag != atom("entry"):
        raise ProtocolError(f"Expected an Atom entry document, got {root.tag}")
    return decode_entry(root)


def _edit_link(element: ET.Element) -> str:
    links = [link for link in element.findall(atom("link")) if link.get("rel") == "edit"]
    if len(links) != 1:
        raise ProtocolError(f"Expected exactly one edit link, found {len(links)}")
    return _required_attr(links[0], "href")


def _required(element: ET.Element, tag: str) -> ET.Element:
    child = element.find(tag)
    if child is None:
        raise ProtocolError(f"Missing element {tag} in {element.tag}")
    return child


def _required_attr(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise ProtocolError(f"Missing attribute {name!r} on {element.tag}")
    return value


def _text(element: ET.Element) -> str:
    return "".join(element.itertext())


def _datetime(element: ET.Element, tag: str) -> HatenaDateTime:
    text = _text(_required(element, tag))
    try:
        return HatenaDateTime.parse(text)
    except (FormatError, RangeError) as e:
        raise ProtocolError(f"Invalid date-time in {tag}: {e}") from e
