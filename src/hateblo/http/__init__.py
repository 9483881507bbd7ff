"""hateblo HTTP utilities.

Provides request signing, pacing and the AtomPub HTTP client.

Example:
    >>> from hateblo.http import AtomPubClient, RateLimiter, WsseAuth
    >>>
    >>> # Pacing
    >>> limiter = RateLimiter(min_interval=1.0)
    >>> await limiter.acquire()
    >>>
    >>> # Signed AtomPub requests
    >>> async with AtomPubClient(auth=WsseAuth("alice", "api-key")) as client:
    ...     body = await client.get("https://blog.hatena.ne.jp/alice/alice.hatenablog.com/atom/entry")
"""

from hateblo.http.auth import BasicAuth, OAuth1Auth, RequestSigner, WsseAuth, build_auth
from hateblo.http.client import AtomPubClient, atompub_client, verify_response
from hateblo.http.rate_limiter import RateLimiter

__all__ = [
    "AtomPubClient",
    "BasicAuth",
    "OAuth1Auth",
    "RateLimiter",
    "RequestSigner",
    "WsseAuth",
    "atompub_client",
    "build_auth",
    "verify_response",
]
