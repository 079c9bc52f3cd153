"""Exception types raised by geotime.

Only ``DecodeError`` reaches callers of the public API. The calendar and
magnitude signals are raised by the rendering tiers and consumed by
``geotime.rendering``.
"""


class DecodeError(ValueError):
    """Malformed input to a lexical codec (wrong length, unknown symbol,
    or non-zero padding bits)."""


class CalendarError(Exception):
    """The calendar backend cannot render a value."""


class CalendarOutOfRange(CalendarError):
    """The value lies outside the calendar backend's representable range."""


class InvalidPattern(CalendarError):
    """The calendar backend rejected the format pattern."""


class MagnitudeUnsafe(ArithmeticError):
    """The magnitude approximation cannot be trusted for this value."""
