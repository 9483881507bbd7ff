"""
hateblo - Async AtomPub client for Hatena Blog.

hateblo lists, reads and writes Hatena Blog entries over the AtomPub API,
streaming long entry listings page by page while keeping a polite minimum
interval between requests.

Key Features:
- Paced, single-pass entry streams usable with ``async for`` or ``for``
- Round-trip-safe Atom entry codec
- Locale-independent wire date-time type (``HatenaDateTime``)
- Basic, WSSE and OAuth 1.0a request signing

Quick Start:
    >>> from hateblo import AtomPubClient, Blog, WsseAuth
    >>> async with AtomPubClient(auth=WsseAuth("alice", "api-key")) as client:
    ...     blog = Blog(client, "alice", "alice.hatenablog.com")
    ...     async for entry in blog.entries():
    ...         print(entry.title)
"""

from hateblo.atom import Feed, decode_categories, decode_entry, decode_feed, encode_entry
from hateblo.blog import Blog
from hateblo.core.config import Settings, get_settings
from hateblo.core.exceptions import (
    ConfigurationError,
    FatalProtocolViolation,
    FormatError,
    HatebloError,
    InternalServerError,
    ProtocolError,
    RangeError,
    ResourceNotFoundError,
    TransportError,
    ValidationError,
)
from hateblo.http import AtomPubClient, BasicAuth, OAuth1Auth, RateLimiter, WsseAuth, build_auth
from hateblo.models import Content, ContentType, Entry, HatenaDateTime
from hateblo.stream import PaginatedEntryStream

__version__ = "0.1.0"

__all__ = [
    # Blog access
    "AtomPubClient",
    "Blog",
    "PaginatedEntryStream",
    "RateLimiter",
    # Authentication
    "BasicAuth",
    "OAuth1Auth",
    "WsseAuth",
    "build_auth",
    # Models
    "Content",
    "ContentType",
    "Entry",
    "Feed",
    "HatenaDateTime",
    # Codecs
    "decode_categories",
    "decode_entry",
    "decode_feed",
    "encode_entry",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "ConfigurationError",
    "FatalProtocolViolation",
    "FormatError",
    "HatebloError",
    "InternalServerError",
    "ProtocolError",
    "RangeError",
    "ResourceNotFoundError",
    "TransportError",
    "ValidationError",
    "__version__",
]
