"""Blog: entry listing, CRUD and categories for one Hatena blog.

Example:
    >>> from hateblo import AtomPubClient, Blog, Entry, WsseAuth
    >>>
    >>> async with AtomPubClient(auth=WsseAuth("alice", "api-key")) as client:
    ...     blog = Blog(client, "alice", "alice.hatenablog.com")
    ...     async with blog.entries() as stream:
    ...         async for entry in stream:
    ...             print(entry.id, entry.title)
    ...     posted = await blog.post(Entry(title="Hello", is_draft=True))
"""

from __future__ import annotations

import logging

from hateblo.atom.entry import encode_entry, load_entry
from hateblo.atom.feed import Feed, load_categories, load_feed
from hateblo.core.config import Settings
from hateblo.core.exceptions import ValidationError
from hateblo.core.validation import not_empty
from hateblo.http.auth import build_auth
from hateblo.http.client import AtomPubClient
from hateblo.models.entry import Entry
from hateblo.stream import PaginatedEntryStream

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://blog.hatena.ne.jp"


class Blog:
    """One blog on Hatena Blog, addressed through its AtomPub endpoints.

    The HTTP client (and with it the request signer) is injected, so several
    ``Blog`` objects can share one client.

    Attributes:
        hatena_id: Owner's Hatena ID.
        blog_id: Blog ID, usually the blog's domain.
    """

    def __init__(
        self,
        client: AtomPubClient,
        hatena_id: str,
        blog_id: str,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        if client is None:
            raise ValidationError("client cannot be None.", "client")
        self._client = client
        self.hatena_id = not_empty(hatena_id, "hatena_id")
        self.blog_id = not_empty(blog_id, "blog_id")
        root = f"{not_empty(base_url, 'base_url').rstrip('/')}/{hatena_id}/{blog_id}/atom"
        self._collection_uri = f"{root}/entry"
        self._category_uri = f"{root}/category"

    @classmethod
    def from_settings(cls, settings: Settings) -> Blog:
        """Build a blog and its signed client from configuration.

        Raises:
            ConfigurationError: If credentials are incomplete.
            ValidationError: If the blog is not configured.
        """
        client = AtomPubClient(
            auth=build_auth(settings),
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )
        return cls(client, settings.hatena_id, settings.blog_id, settings.base_url)

    @property
    def client(self) -> AtomPubClient:
        return self._client

    @property
    def collection_uri(self) -> str:
        """URI of the entry collection (first page of the listing)."""
        return self._collection_uri

    @property
    def category_uri(self) -> str:
        """URI of the category document."""
        return self._category_uri

    def member_uri(self, entry_id: str) -> str:
        """URI of a single entry."""
        return f"{self._collection_uri}/{not_empty(entry_id, 'entry_id')}"

    async def fetch_page(self, uri: str) -> Feed:
        """Fetch and decode one page of the collection."""
        return load_feed(await self._client.get(uri))

    def entries(self, min_interval: float = 1.0) -> PaginatedEntryStream:
        """Stream every entry, newest first, pacing page requests.

        Args:
            min_interval: Minimum seconds between consecutive page requests.
        """
        return PaginatedEntryStream(self.fetch_page, self._collection_uri, min_interval)

    async def get_entry(self, entry_id: str) -> Entry:
        """Fetch a single entry by ID.

        Raises:
            ResourceNotFoundError: If no such entry exists.
        """
        return load_entry(await self._client.get(self.member_uri(entry_id)))

    async def post(self, entry: Entry) -> Entry:
        """Publish a new entry (or save it as a draft).

        Returns:
            The entry as stored by the server, with its ID and server fields.
        """
        self._require_entry(entry)
        body = await self._client.post(self._collection_uri, encode_entry(entry))
        posted = load_entry(body)
        logger.info(f"Posted entry {posted.id} to {self.blog_id}")
        return posted

    async def update(self, entry: Entry) -> Entry:
        """Replace a loaded entry with its current field values.

        Returns:
            The entry as stored by the server.
        """
        body = await self._client.put(self._loaded_uri(entry), encode_entry(entry))
        return load_entry(body)

    async def remove(self, entry: Entry) -> None:
        """Delete a loaded entry."""
        await self._client.delete(self._loaded_uri(entry))
        logger.info(f"Removed entry {entry.id} from {self.blog_id}")

    async def remove_by_id(self, entry_id: str) -> None:
        """Delete an entry by ID."""
        await self._client.delete(self.member_uri(entry_id))
        logger.info(f"Removed entry {entry_id} from {self.blog_id}")

    async def categories(self) -> list[str]:
        """Categories used on the blog, in the order the server lists them."""
        return load_categories(await self._client.get(self._category_uri))

    def _loaded_uri(self, entry: Entry) -> str:
        self._require_entry(entry)
        if entry.member_uri is None:
            raise ValidationError("entry has not been loaded from the server.", "entry")
        return entry.member_uri

    @staticmethod
    def _require_entry(entry: Entry) -> None:
        if not isinstance(entry, Entry):
            raise ValidationError("entry must be an Entry.", "entry")

    def __repr__(self) -> str:
        return f"Blog(hatena_id={self.hatena_id!r}, blog_id={self.blog_id!r})"
