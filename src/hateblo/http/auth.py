"""Request signing for the AtomPub API.

Hatena Blog accepts three schemes. Each is a ``RequestSigner``: an object
with ``sign(request) -> request`` that attaches the headers its scheme needs.
All three are also ``httpx.Auth`` instances, so they plug straight into an
``httpx.AsyncClient``.

Example:
    >>> from hateblo.http.auth import WsseAuth
    >>> import httpx
    >>> auth = WsseAuth("alice", "api-key")
    >>> request = auth.sign(httpx.Request("GET", "https://blog.hatena.ne.jp/"))
    >>> request.headers["X-WSSE"].startswith('UsernameToken Username="alice"')
    True
"""

from __future__ import annotations

import base64
import hashlib
import secrets
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

import httpx
from oauthlib.oauth1 import SIGNATURE_HMAC, Client

from hateblo.core.config import Settings
from hateblo.core.exceptions import ConfigurationError, ValidationError
from hateblo.core.validation import not_empty


@runtime_checkable
class RequestSigner(Protocol):
    """Anything that can sign an outgoing request."""

    def sign(self, request: httpx.Request) -> httpx.Request:
        """Attach authentication headers and return the request."""
        ...


class _SigningAuth(httpx.Auth):
    """Adapts ``sign`` to the httpx auth flow."""

    def sign(self, request: httpx.Request) -> httpx.Request:
        raise NotImplementedError

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield self.sign(request)


class BasicAuth(_SigningAuth):
    """HTTP Basic authentication with the AtomPub API key.

    The header is computed once and attached to every request.
    """

    def __init__(self, hatena_id: str, api_key: str) -> None:
        self.hatena_id = not_empty(hatena_id, "hatena_id")
        self.api_key = not_empty(api_key, "api_key")
        credentials = base64.b64encode(f"{hatena_id}:{api_key}".encode("ascii")).decode("ascii")
        self._header = f"Basic {credentials}"

    def sign(self, request: httpx.Request) -> httpx.Request:
        request.headers["Authorization"] = self._header
        return request


class WsseAuth(_SigningAuth):
    """WSSE UsernameToken authentication.

    A fresh nonce and creation time are generated for every request.
    """

    NONCE_LENGTH = 40

    def __init__(self, hatena_id: str, api_key: str) -> None:
        self.hatena_id = not_empty(hatena_id, "hatena_id")
        self.api_key = not_empty(api_key, "api_key")

    def credentials(self, nonce: bytes, created: datetime) -> str:
        """Build the ``X-WSSE`` header value for a nonce and timestamp."""
        nonce_b64 = base64.b64encode(nonce).decode("ascii")
        created_text = created.strftime("%Y-%m-%dT%H:%M:%SZ")
        digest = hashlib.sha1(f"{nonce_b64}{created_text}{self.api_key}".encode()).digest()
        digest_b64 = base64.b64encode(digest).decode("ascii")
        return (
            "UsernameToken "
            f'Username="{self.hatena_id}", '
            f'PasswordDigest="{digest_b64}", '
            f'Nonce="{nonce_b64}", '
            f'Created="{created_text}"'
        )

    def sign(self, request: httpx.Request) -> httpx.Request:
        nonce = secrets.token_bytes(self.NONCE_LENGTH)
        request.headers["X-WSSE"] = self.credentials(nonce, datetime.now(UTC))
        return request


class OAuth1Auth(_SigningAuth):
    """OAuth 1.0a (HMAC-SHA1) signing with an issued access token.

    Obtaining the access token is outside this library.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        access_token: str,
        access_token_secret: str,
    ) -> None:
        self._client = Client(
            not_empty(consumer_key, "consumer_key"),
            client_secret=not_empty(consumer_secret, "consumer_secret"),
            resource_owner_key=not_empty(access_token, "access_token"),
            resource_owner_secret=not_empty(access_token_secret, "access_token_secret"),
            signature_method=SIGNATURE_HMAC,
        )
        self.consumer_key = consumer_key

    def sign(self, request: httpx.Request) -> httpx.Request:
        # The XML body is not form-encoded, so only the URI and method are signed.
        _, headers, _ = self._client.sign(str(request.url), http_method=request.method)
        request.headers["Authorization"] = headers["Authorization"]
        return request


def build_auth(settings: Settings) -> _SigningAuth:
    """Create the signer selected by ``settings.auth_scheme``.

    Raises:
        ConfigurationError: If a credential the scheme needs is missing.
    """
    try:
        if settings.auth_scheme == "basic":
            return BasicAuth(settings.hatena_id, settings.api_key)
        if settings.auth_scheme == "wsse":
            return WsseAuth(settings.hatena_id, settings.api_key)
        return OAuth1Auth(
            settings.consumer_key,
            settings.consumer_secret,
            settings.access_token,
            settings.access_token_secret,
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Incomplete credentials for auth scheme {settings.auth_scheme!r}: {e}"
        ) from e


__all__ = [
    "BasicAuth",
    "OAuth1Auth",
    "RequestSigner",
    "WsseAuth",
    "build_auth",
]
