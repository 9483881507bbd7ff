"""Argument precondition helpers."""

from __future__ import annotations

from typing import Any

from hateblo.core.exceptions import RangeError, ValidationError


def not_empty(value: Any, param: str) -> str:
    """Require a non-empty string and return it.

    Example:
        >>> from hateblo.core.validation import not_empty
        >>> not_empty("alice", "hatena_id")
        'alice'
    """
    if value is None:
        raise ValidationError(f"{param} cannot be None.", param)
    if not isinstance(value, str):
        raise ValidationError(f"{param} must be a string.", param)
    if value == "":
        raise ValidationError(f"{param} cannot be empty.", param)
    return value


def in_range(
    value: Any,
    min_value: Any,
    max_value: Any,
    param: str,
    *,
    min_name: str | None = None,
    max_name: str | None = None,
) -> None:
    """Require ``min_value <= value <= max_value``.

    Example:
        >>> from hateblo.core.validation import in_range
        >>> in_range(13, 1, 12, "month")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        RangeError: month is less than 1 or greater than 12.
    """
    if value < min_value or value > max_value:
        raise RangeError(
            f"{param} is less than {min_name or min_value} "
            f"or greater than {max_name or max_value}.",
            param,
        )
