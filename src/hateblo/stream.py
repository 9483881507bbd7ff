"""Paced, page-by-page entry streaming.

``PaginatedEntryStream`` follows the ``next`` links of a collection, fetching
one page at a time and keeping at least ``min_interval`` seconds between the
completion of one fetch and the start of the next.

Example:
    >>> from hateblo.stream import PaginatedEntryStream
    >>>
    >>> stream = PaginatedEntryStream(fetch_page, collection_uri, min_interval=1.0)
    >>> async with stream:
    ...     async for entry in stream:
    ...         print(entry.title)
    >>>
    >>> # Blocking form, for scripts
    >>> for entry in PaginatedEntryStream(fetch_page, collection_uri):
    ...     print(entry.title)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncGenerator, AsyncIterator, Awaitable, Callable, Iterator
from contextlib import aclosing
from typing import TypeVar

from hateblo.atom.feed import Feed
from hateblo.core.exceptions import ValidationError
from hateblo.core.validation import not_empty
from hateblo.http.rate_limiter import RateLimiter
from hateblo.models.entry import Entry

logger = logging.getLogger(__name__)

FetchPage = Callable[[str], Awaitable[Feed]]

T = TypeVar("T")


class PaginatedEntryStream:
    """Single-pass stream of entries spanning any number of pages.

    Pages are fetched strictly one after another: the next page is requested
    only after the current page has been handed out and the pacing delay has
    elapsed. Entries of a fetched page are yielded without waiting.

    The stream can be consumed once, with ``async for``, ``pages()`` or a
    plain ``for`` loop. ``next_page()`` pulls pages by hand instead; it
    cannot be mixed with iteration, and only one fetch runs at a time.

    Example:
        >>> async def fetch_page(uri):
        ...     return load_feed(await client.get(uri))
        >>> stream = PaginatedEntryStream(fetch_page, "https://.../atom/entry")
        >>> page = await stream.next_page()
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        initial_uri: str,
        min_interval: float = 1.0,
    ) -> None:
        """Initialize the stream.

        Args:
            fetch_page: Coroutine function returning the decoded page at a URI.
                Transport, status mapping and XML decoding are its concern.
            initial_uri: URI of the first page (the collection URI).
            min_interval: Minimum seconds between one fetch completing and the
                next one starting.

        Raises:
            ValidationError: If an argument is missing or invalid.
        """
        if not callable(fetch_page):
            raise ValidationError("fetch_page must be callable.", "fetch_page")
        self._fetch_page = fetch_page
        self._initial_uri = not_empty(initial_uri, "initial_uri")
        self._limiter = RateLimiter(min_interval)
        self._current: Feed | None = None
        self._exhausted = False
        self._claimed = False
        self._pulling = False

    @property
    def min_interval(self) -> float:
        """Minimum seconds between page fetches."""
        return self._limiter.min_interval

    @property
    def current_page(self) -> Feed | None:
        """Page last returned by ``next_page``, ``None`` before the first and after the end."""
        return self._current

    @property
    def exhausted(self) -> bool:
        """True once the last page has been fetched or the stream was closed."""
        return self._exhausted

    async def next_page(self) -> Feed | None:
        """Fetch the next page.

        The page is held as ``current_page`` until the following call. Not
        available once the stream is being iterated.

        Returns:
            The next ``Feed``, or ``None`` when the stream is exhausted.

        Raises:
            RuntimeError: If another fetch is in progress or the stream is
                being iterated.
            Whatever ``fetch_page`` raises; the stream is closed first.
        """
        if self._claimed:
            raise RuntimeError("next_page() cannot be used while the stream is iterated")
        if self._exhausted:
            return None

        uri = self._initial_uri if self._current is None else self._current.next_request_uri
        page = await self._fetch(uri)
        if page.is_last:
            self._current = None
            self._exhausted = True
        else:
            self._current = page
        return page

    async def _fetch(self, uri: str) -> Feed:
        if self._pulling:
            raise RuntimeError("a page fetch is already in progress on this stream")
        self._pulling = True
        try:
            await self._limiter.acquire()
            logger.debug(f"Fetching page {uri}")
            page = await self._fetch_page(uri)
        except BaseException:
            self.close()
            raise
        finally:
            self._pulling = False
        self._limiter.release()
        logger.debug(f"Fetched {len(page)} entries from {uri}")
        return page

    def pages(self) -> AsyncIterator[Feed]:
        """Iterate over the pages."""
        self._claim()
        return self._walk()

    async def _walk(self) -> AsyncGenerator[Feed, None]:
        # The cursor lives here, so an abandoned iteration holds no stream state.
        uri = self._initial_uri if self._current is None else self._current.next_request_uri
        self._current = None
        try:
            while uri is not None and not self._exhausted:
                page = await self._fetch(uri)
                uri = page.next_request_uri
                if uri is None:
                    self._exhausted = True
                yield page
        finally:
            self.close()

    def __aiter__(self) -> AsyncIterator[Entry]:
        self._claim()
        return self._entries()

    async def _entries(self) -> AsyncGenerator[Entry, None]:
        async with aclosing(self._walk()) as pages:
            async for page in pages:
                for entry in page:
                    yield entry

    def __iter__(self) -> Iterator[Entry]:
        """Blocking iteration on a private event loop.

        Pulls one entry at a time, so no page is fetched before the caller
        asks for an entry it contains. Must not be used from a thread that is
        already running an event loop.
        """
        self._claim()
        return _iterate_blocking(self._entries())

    def close(self) -> None:
        """Stop the stream and drop the held page."""
        self._current = None
        self._exhausted = True
        self._limiter.reset()

    async def __aenter__(self) -> PaginatedEntryStream:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _claim(self) -> None:
        if self._claimed:
            raise RuntimeError("PaginatedEntryStream can only be iterated once")
        self._claimed = True


def _iterate_blocking(agen: AsyncGenerator[T, None]) -> Iterator[T]:
    loop = asyncio.new_event_loop()
    done = object()

    async def pull() -> T | object:
        try:
            return await agen.__anext__()
        except StopAsyncIteration:
            return done

    async def finish() -> None:
        async with aclosing(agen):
            pass

    try:
        while (item := loop.run_until_complete(pull())) is not done:
            yield item
    finally:
        try:
            loop.run_until_complete(finish())
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()


__all__ = [
    "FetchPage",
    "PaginatedEntryStream",
]
