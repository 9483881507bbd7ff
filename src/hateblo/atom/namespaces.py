"""XML namespaces and parsing helpers shared by the Atom codecs."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from hateblo.core.exceptions import ProtocolError

ATOM_NS = "http://www.w3.org/2005/Atom"
APP_NS = "http://www.w3.org/2007/app"
HATENA_NS = "http://www.hatena.ne.jp/info/xmlns#"

ET.register_namespace("app", APP_NS)
ET.register_namespace("hatena", HATENA_NS)


def atom(tag: str) -> str:
    """Qualified Atom tag name."""
    return f"{{{ATOM_NS}}}{tag}"


def app(tag: str) -> str:
    """Qualified AtomPub tag name."""
    return f"{{{APP_NS}}}{tag}"


def hatena(tag: str) -> str:
    """Qualified Hatena extension tag name."""
    return f"{{{HATENA_NS}}}{tag}"


def parse_xml(body: bytes | str) -> ET.Element:
    """Parse a response body into its root element.

    Raises:
        ProtocolError: If the body is not well-formed XML.
    """
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise ProtocolError(f"Failed to parse response XML: {e}") from e
