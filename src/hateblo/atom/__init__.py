"""Atom/AtomPub codecs for entries, feeds and category documents.

Example:
    >>> from hateblo.atom import encode_entry, load_feed
    >>> feed = load_feed('<feed xmlns="http://www.w3.org/2005/Atom"/>')
    >>> len(feed), feed.is_last
    (0, True)
"""

from hateblo.atom.entry import decode_entry, encode_entry, load_entry
from hateblo.atom.feed import Feed, decode_categories, decode_feed, load_categories, load_feed
from hateblo.atom.namespaces import APP_NS, ATOM_NS, HATENA_NS

__all__ = [
    "APP_NS",
    "ATOM_NS",
    "HATENA_NS",
    "Feed",
    "decode_categories",
    "decode_entry",
    "decode_feed",
    "encode_entry",
    "load_categories",
    "load_entry",
    "load_feed",
]
