"""Custom exceptions.

hateblo uses a hierarchy of exceptions to provide clear error handling:

Example:
    >>> from hateblo.core.exceptions import HatebloError, ResourceNotFoundError
    >>> isinstance(ResourceNotFoundError(), HatebloError)
    True
    >>> try:
    ...     raise ResourceNotFoundError()
    ... except HatebloError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: ResourceNotFoundError

``FatalProtocolViolation`` is deliberately not a ``HatebloError``: it signals
that the client and the service disagree about the API contract, and is not
meant to be handled.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class HatebloError(Exception):
    """Base exception for hateblo.

    Example:
        >>> from hateblo.core.exceptions import HatebloError
        >>> e = HatebloError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class ValidationError(HatebloError, ValueError):
    """A caller-supplied argument violates a precondition.

    Example:
        >>> from hateblo.core.exceptions import ValidationError
        >>> raise ValidationError("blog_id cannot be empty.")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ValidationError: blog_id cannot be empty.
    """

    def __init__(self, message: str, param: str | None = None) -> None:
        super().__init__(message)
        self.param = param


class RangeError(ValidationError):
    """A numeric argument lies outside its valid range.

    Example:
        >>> from hateblo.core.exceptions import RangeError, ValidationError
        >>> issubclass(RangeError, ValidationError)
        True
    """


class FormatError(HatebloError, ValueError):
    """A string does not match the expected grammar."""


class ProtocolError(HatebloError):
    """A response is missing an expected element or has an unexpected shape.

    Example:
        >>> from hateblo.core.exceptions import ProtocolError
        >>> raise ProtocolError("entry has no edit link")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ProtocolError: entry has no edit link
    """


class ResourceNotFoundError(HatebloError):
    """The requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str = "Resource not found.") -> None:
        super().__init__(message)


class InternalServerError(HatebloError):
    """The service failed to handle the request (HTTP 500)."""

    def __init__(self, message: str = "Internal server error.") -> None:
        super().__init__(message)


class TransportError(HatebloError):
    """The HTTP request could not be completed.

    Example:
        >>> from hateblo.core.exceptions import TransportError
        >>> err = TransportError("connection refused", url="https://example.com")
        >>> err.url
        'https://example.com'
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ConfigurationError(HatebloError):
    """Configuration is invalid.

    Example:
        >>> from hateblo.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("missing api_key")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: missing api_key
    """


class FatalProtocolViolation(Exception):
    """The service returned something this client has no mapping for.

    Unknown content types, unknown draft tokens and unexpected HTTP status
    codes all end up here. Seeing this means the library or the service API
    changed; it should abort the operation loudly.
    """


def report_bug(detail: str) -> FatalProtocolViolation:
    """Log a contract violation and build the exception to raise.

    Example:
        >>> from hateblo.core.exceptions import report_bug
        >>> exc = report_bug("unknown draft token 'maybe'")
        >>> type(exc).__name__
        'FatalProtocolViolation'
    """
    message = (
        f"Unexpected response from Hatena Blog AtomPub: {detail}. "
        "This is a bug in hateblo or an API change; please report it."
    )
    logger.critical(message)
    return FatalProtocolViolation(message)


__all__ = [
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
    "report_bug",
]
