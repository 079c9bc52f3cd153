"""Human-readable rendering of Geotime values.

Rendering tries three tiers in order and the first one that produces text
wins:

1. Calendar: the calendar backend formats the value with the caller's
   pattern ("1970-01-01").
2. Magnitude: an approximate distance from the epoch
   ("299.87 M years from now").
3. Raw: the exact millisecond value ("Geotime(-1701...) ms ago"). This tier
   does no floating-point or backend work and always succeeds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from geotime import config
from geotime.calendars import CalendarBackend, DatetimeCalendar
from geotime.errors import CalendarError, MagnitudeUnsafe
from geotime.magnitude import MagnitudeFormatter
from geotime.timestamp import Geotime

logger = logging.getLogger(__name__)


class FormatTier(StrEnum):
    """Rendering tier that produced a display string."""

    CALENDAR = "calendar"
    MAGNITUDE = "magnitude"
    RAW = "raw"


@dataclass(frozen=True)
class Rendering:
    """Display text together with the tier that produced it."""

    tier: FormatTier
    text: str

    def __str__(self) -> str:
        return self.text


class DisplayPipeline:
    """Renders timestamps through the calendar → magnitude → raw tiers.

    Example usage:
        pipeline = DisplayPipeline()
        pipeline.render(Geotime(0), "%Y-%m-%d")
        # Rendering(tier=<FormatTier.CALENDAR: 'calendar'>, text='1970-01-01')
    """

    def __init__(
        self,
        calendar: CalendarBackend | None = None,
        max_years: float | None = None,
    ):
        """Initialize the pipeline.

        Args:
            calendar: Backend for the calendar tier. Defaults to the stdlib
                datetime calendar.
            max_years: Largest year count the magnitude tier will render.
                Defaults to ``settings.magnitude_max_years``, read at render
                time.
        """
        self.calendar = calendar if calendar is not None else DatetimeCalendar()
        self.magnitude = MagnitudeFormatter(max_years)

    def render(self, value: Geotime | int, pattern: str | None = None) -> Rendering:
        """Render ``value``, falling back tier by tier.

        Args:
            value: Timestamp (or integer millisecond offset) to render.
            pattern: strftime pattern for the calendar tier. Defaults to
                ``settings.default_pattern``.

        Raises:
            TypeError: If ``value`` is neither a Geotime nor an int.
            ValueError: If an int offset is outside the signed 128-bit range.
        """
        if not isinstance(value, Geotime):
            value = Geotime(value)
        if pattern is None:
            pattern = config.settings.default_pattern

        tiers: tuple[tuple[FormatTier, Callable[[Geotime, str], str | None]], ...] = (
            (FormatTier.CALENDAR, self._calendar_tier),
            (FormatTier.MAGNITUDE, self._magnitude_tier),
        )
        for tier, attempt in tiers:
            text = attempt(value, pattern)
            if text is not None:
                return Rendering(tier, text)

        return Rendering(FormatTier.RAW, self._raw_tier(value))

    def _calendar_tier(self, value: Geotime, pattern: str) -> str | None:
        try:
            return self.calendar.format(value, pattern)
        except CalendarError as e:
            logger.debug(f"Calendar tier unavailable for {value!r}: {e}")
            return None

    def _magnitude_tier(self, value: Geotime, pattern: str) -> str | None:
        try:
            return self.magnitude.format(value)
        except MagnitudeUnsafe as e:
            logger.debug(f"Magnitude tier unavailable for {value!r}: {e}")
            return None

    @staticmethod
    def _raw_tier(value: Geotime) -> str:
        return f"{value!r} ms ago"


# Shared by display(). Reads settings at render time, so it follows changes
# to ``geotime.config.settings``.
default_pipeline = DisplayPipeline()


def display(value: Geotime | int, pattern: str | None = None) -> str:
    """Render a timestamp for humans. Never fails for a valid timestamp.

    >>> display(Geotime(0), "%Y-%m-%d")
    '1970-01-01'
    >>> display(Geotime(2**63), "%Y")
    '299.87 M years from now'
    """
    return default_pipeline.render(value, pattern).text
