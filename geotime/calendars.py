"""Calendar backends used by the first display tier."""

from __future__ import annotations

from typing import Protocol

from geotime.errors import InvalidPattern
from geotime.timestamp import Geotime


class CalendarBackend(Protocol):
    """Formats a timestamp with a strftime-style pattern.

    Implementations raise ``CalendarOutOfRange`` for values they cannot
    represent and ``InvalidPattern`` for patterns they cannot render, rather
    than returning a wrong string.
    """

    def format(self, value: Geotime, pattern: str) -> str: ...


class DatetimeCalendar:
    """Proleptic Gregorian calendar in UTC, backed by ``datetime``.

    Covers years 1 through 9999.
    """

    def format(self, value: Geotime, pattern: str) -> str:
        dt = value.to_datetime()
        try:
            return dt.strftime(pattern)
        except ValueError as e:
            raise InvalidPattern(f"Cannot render pattern {pattern!r}: {e}") from e
