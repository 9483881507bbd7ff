"""HTTP client for the AtomPub API.

Wraps an ``httpx.AsyncClient`` with:
- Request signing through one of the ``hateblo.http.auth`` strategies
- Mapping of HTTP status codes onto the hateblo error hierarchy
- No automatic retries; failures surface to the caller

Example:
    >>> from hateblo.http import AtomPubClient, WsseAuth
    >>>
    >>> async with AtomPubClient(auth=WsseAuth("alice", "api-key")) as client:
    ...     body = await client.get("https://blog.hatena.ne.jp/alice/alice.hatenablog.com/atom/entry")
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from hateblo.core.exceptions import (
    InternalServerError,
    ResourceNotFoundError,
    TransportError,
    ValidationError,
    report_bug,
)

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml"


def verify_response(response: httpx.Response) -> None:
    """Map a response status onto the error hierarchy.

    Raises:
        ResourceNotFoundError: On 404.
        InternalServerError: On 500.
        FatalProtocolViolation: On any other non-2xx status (400, 401, 405, ...).
    """
    if response.is_success:
        return
    if response.status_code == 404:
        raise ResourceNotFoundError()
    if response.status_code == 500:
        raise InternalServerError()
    raise report_bug(
        f"HTTP {response.status_code} {response.reason_phrase} "
        f"for {response.request.method} {response.request.url}"
    )


class AtomPubClient:
    """Async HTTP client for AtomPub requests.

    Example:
        >>> async with AtomPubClient(auth=BasicAuth("alice", "key")) as client:
        ...     body = await client.get(collection_uri)
        ...     await client.delete(member_uri)

    Attributes:
        user_agent: User-Agent header value
        timeout: Default request timeout in seconds
    """

    def __init__(
        self,
        auth: httpx.Auth | None = None,
        user_agent: str = "hateblo/0.1.0",
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize HTTP client.

        Args:
            auth: Request signer (see ``hateblo.http.auth``)
            user_agent: User-Agent header
            timeout: Default request timeout
            headers: Additional default headers
            transport: Custom httpx transport (e.g. ``httpx.MockTransport``)
            client: Pre-built ``httpx.AsyncClient``; used as is and not closed
                by this object
        """
        self._auth = auth
        self._user_agent = user_agent
        self._timeout = timeout
        self._extra_headers = headers or {}
        self._transport = transport
        self._client = client
        self._owns_client = client is None
        self._client_loop: asyncio.AbstractEventLoop | None = None

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        return self._user_agent

    @property
    def timeout(self) -> float:
        """Default request timeout in seconds."""
        return self._timeout

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        return {
            "User-Agent": self._user_agent,
            "Accept": "application/atom+xml, application/xml",
            **self._extra_headers,
        }

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client.

        An owned client is tied to the event loop it was created on. On any
        other loop (such as the private loop of a blocking stream) a new one
        is built, since pooled connections cannot move between loops.

        Raises:
            ValidationError: If an injected client has already been closed.
        """
        if not self._owns_client:
            if self._client.is_closed:
                raise ValidationError("The injected httpx.AsyncClient is closed.", "client")
            return self._client

        loop = asyncio.get_running_loop()
        if self._client is not None and self._client_loop is not loop:
            logger.debug("Event loop changed; creating a new HTTP client")
            self._client = None
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                auth=self._auth,
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
            self._client_loop = loop
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if not self._owns_client or self._client is None:
            return
        # A client left on another, possibly closed, loop is only dropped.
        if self._client_loop is asyncio.get_running_loop() and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
        self._client_loop = None

    async def __aenter__(self) -> AtomPubClient:
        """Async context manager entry."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def request(self, method: str, url: str, **kwargs: Any) -> bytes:
        """Send a request and return the body of a successful response.

        Args:
            method: HTTP method
            url: Absolute URL
            **kwargs: Additional arguments for httpx

        Returns:
            Response body

        Raises:
            ResourceNotFoundError: On 404
            InternalServerError: On 500
            FatalProtocolViolation: On any other non-2xx status
            TransportError: If the request could not be completed
        """
        client = self._ensure_client()
        logger.debug(f"{method} {url}")

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}", url=url) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        verify_response(response)
        return response.content

    async def get(self, url: str, **kwargs: Any) -> bytes:
        """Make a GET request."""
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, content: bytes, **kwargs: Any) -> bytes:
        """POST an XML document."""
        return await self.request(
            "POST", url, content=content, headers={"Content-Type": XML_CONTENT_TYPE}, **kwargs
        )

    async def put(self, url: str, content: bytes, **kwargs: Any) -> bytes:
        """PUT an XML document."""
        return await self.request(
            "PUT", url, content=content, headers={"Content-Type": XML_CONTENT_TYPE}, **kwargs
        )

    async def delete(self, url: str, **kwargs: Any) -> bytes:
        """Make a DELETE request."""
        return await self.request("DELETE", url, **kwargs)


@asynccontextmanager
async def atompub_client(**kwargs: Any) -> AsyncIterator[AtomPubClient]:
    """Context manager for an AtomPub client.

    Example:
        >>> async with atompub_client(auth=auth) as client:
        ...     body = await client.get(uri)
    """
    client = AtomPubClient(**kwargs)
    try:
        async with client:
            yield client
    finally:
        await client.close()


__all__ = [
    "AtomPubClient",
    "atompub_client",
    "verify_response",
]
