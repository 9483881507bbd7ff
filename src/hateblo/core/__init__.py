"""Core configuration, errors and validation."""

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
    report_bug,
)

__all__ = [
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
    "report_bug",
]
