"""Calendar timestamp with an explicit UTC offset.

``HatenaDateTime`` is the date-time type used on the Hatena Blog wire format.
It does its own parsing and formatting so the result never depends on the
host locale, and it can represent year 0, which ``datetime`` cannot.

Example:
    >>> from hateblo.models.hatena_datetime import HatenaDateTime
    >>> value = HatenaDateTime.parse("2020-02-29T09:30:00+09:00")
    >>> value.month, value.day
    (2, 29)
    >>> str(value)
    '2020-02-29T09:30:00+09:00:00'
    >>> HatenaDateTime.parse(str(value)) == value
    True
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from hateblo.core.exceptions import FormatError, ValidationError
from hateblo.core.validation import in_range

_PATTERN = re.compile(
    r"^\s*"
    r"(?P<year>\d{4})"
    r"-"
    r"(?P<month>\d{2})"
    r"-"
    r"(?P<day>\d{2})"
    r"T"
    r"(?P<hour>\d{2})"
    r":"
    r"(?P<minute>\d{2})"
    r":"
    r"(?P<second>\d{2})"
    # "+-05:00" is rejected; an unsigned "05:00" is accepted as positive
    r"(?:(?:\+(?!-))?(?P<offset>-?\d{2}:\d{2}(?::\d{2})?)|(?P<utc>Z))"
    r"\s*$",
    re.ASCII,
)

_MAX_OFFSET = timedelta(hours=14)

# Year 0 is validated against a leap year so that 0000-02-29 is accepted.
_YEAR_ZERO_REFERENCE = 4


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``.

    Example:
        >>> days_in_month(2021, 2), days_in_month(2020, 2), days_in_month(0, 2)
        (28, 29, 29)
    """
    return calendar.monthrange(year or _YEAR_ZERO_REFERENCE, month)[1]


def _parse_offset(text: str) -> timedelta:
    negative = text.startswith("-")
    parts = text.lstrip("-").split(":")
    hours, minutes = int(parts[0]), int(parts[1])
    seconds = int(parts[2]) if len(parts) > 2 else 0
    in_range(minutes, 0, 59, "offset minutes")
    in_range(seconds, 0, 59, "offset seconds")
    offset = timedelta(hours=hours, minutes=minutes, seconds=seconds)
    return -offset if negative else offset


@dataclass(frozen=True)
class HatenaDateTime:
    """Immutable date and time with an offset from UTC.

    Every field is range-checked at construction; an instance that exists is
    always valid.

    Attributes:
        year: 0 to 9999.
        month: 1 to 12.
        day: 1 to the number of days in the month.
        hour: 0 to 23.
        minute: 0 to 59.
        second: 0 to 59.
        offset: -14 hours to +14 hours, whole seconds.

    Raises:
        RangeError: If any field lies outside its range.
        ValidationError: If a field has the wrong type.

    Example:
        >>> HatenaDateTime(2021, 2, 30)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        RangeError: day is less than 1 or greater than days in month.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    offset: timedelta = field(default=timedelta(0))

    def __post_init__(self) -> None:
        for name in ("year", "month", "day", "hour", "minute", "second"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(f"{name} must be an integer.", name)
        if not isinstance(self.offset, timedelta):
            raise ValidationError("offset must be a timedelta.", "offset")

        in_range(self.year, 0, 9999, "year")
        in_range(self.month, 1, 12, "month")
        in_range(
            self.day, 1, days_in_month(self.year, self.month), "day",
            max_name="days in month",
        )
        in_range(self.hour, 0, 23, "hour")
        in_range(self.minute, 0, 59, "minute")
        in_range(self.second, 0, 59, "second")
        in_range(
            self.offset, -_MAX_OFFSET, _MAX_OFFSET, "offset",
            min_name="-14 hours", max_name="14 hours",
        )
        if self.offset.microseconds:
            raise ValidationError("offset must be a whole number of seconds.", "offset")

    @classmethod
    def parse(cls, text: str) -> HatenaDateTime:
        """Parse the ISO 8601 form used by Hatena Blog.

        Args:
            text: ``YYYY-MM-DDThh:mm:ss`` followed by ``Z`` or
                ``[+|-]hh:mm[:ss]``; surrounding whitespace is ignored.

        Raises:
            FormatError: If ``text`` does not match the grammar.
            RangeError: If a matched field lies outside its range.
            ValidationError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise ValidationError("input must be a string.", "text")

        match = _PATTERN.match(text)
        if match is None:
            raise FormatError(f"Invalid date-time format: {text!r}")

        offset = timedelta(0) if match["utc"] else _parse_offset(match["offset"])
        return cls(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            offset,
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> HatenaDateTime:
        """Convert an aware ``datetime``; sub-second precision is dropped."""
        offset = value.utcoffset()
        if offset is None:
            raise ValidationError("datetime must be timezone-aware.", "value")
        return cls(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second,
            timedelta(seconds=int(offset.total_seconds())),
        )

    def to_datetime(self) -> datetime:
        """Convert to an aware ``datetime``.

        Raises:
            ValidationError: If the year is 0, which ``datetime`` cannot hold.
        """
        if self.year == 0:
            raise ValidationError("year 0 cannot be represented as a datetime.", "year")
        return datetime(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second,
            tzinfo=timezone(self.offset),
        )

    def format(self) -> str:
        """Render in the canonical wire form.

        Example:
            >>> HatenaDateTime(2020, 1, 2, 3, 4, 5).format()
            '2020-01-02T03:04:05Z'
            >>> HatenaDateTime(2020, 1, 2, offset=timedelta(hours=-5)).format()
            '2020-01-02T00:00:00-05:00:00'
        """
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f"{self._format_offset()}"
        )

    def _format_offset(self) -> str:
        if not self.offset:
            return "Z"
        sign = "-" if self.offset < timedelta(0) else "+"
        total = abs(int(self.offset.total_seconds()))
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"

    def __str__(self) -> str:
        return self.format()
