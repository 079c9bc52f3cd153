"""Approximate "N <unit> years ago/from now" rendering for huge offsets.

Used for timestamps that the calendar backend cannot represent. The year
length is a fixed policy constant rather than an astronomical one: the
output is an order-of-magnitude hint, not a date.
"""

from __future__ import annotations

import math

from geotime import config
from geotime.errors import MagnitudeUnsafe
from geotime.timestamp import MILLIS_PER_DAY, Geotime

DAYS_PER_YEAR = 356
MILLIS_PER_YEAR = DAYS_PER_YEAR * MILLIS_PER_DAY

# (threshold, abbreviation), largest first
MAGNITUDE_UNITS: tuple[tuple[float, str], ...] = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
    (1.0, ""),
)


def _scale(years: float) -> tuple[float, str]:
    """Pick the largest unit not exceeding ``years``, carrying into the next
    unit when two-decimal rounding reaches 1000."""
    index = next(
        (i for i, (threshold, _) in enumerate(MAGNITUDE_UNITS) if years >= threshold),
        len(MAGNITUDE_UNITS) - 1,
    )
    threshold, unit = MAGNITUDE_UNITS[index]
    scaled = years / threshold
    if index > 0 and round(scaled, 2) >= 1000:
        threshold, unit = MAGNITUDE_UNITS[index - 1]
        scaled = years / threshold
    return scaled, unit


class MagnitudeFormatter:
    """Formats millisecond offsets as scaled year counts.

    Example:
        >>> MagnitudeFormatter().format(Geotime(2**63))
        '299.87 M years from now'
    """

    def __init__(self, max_years: float | None = None):
        """Initialize the formatter.

        Args:
            max_years: Largest year count to render. None reads
                ``settings.magnitude_max_years`` on every call.
        """
        self._max_years = max_years

    @property
    def max_years(self) -> float:
        if self._max_years is None:
            return config.settings.magnitude_max_years
        return self._max_years

    def years(self, value: Geotime) -> float:
        """Signed number of years between the epoch and ``value``."""
        return value.millis / MILLIS_PER_YEAR

    def format(self, value: Geotime) -> str:
        """Render ``value`` as e.g. "29.99 B years ago".

        Raises:
            MagnitudeUnsafe: If the year count is beyond ``max_years`` or
                would not fit below 1000 of the largest unit.
        """
        years = self.years(value)
        magnitude = abs(years)
        limit = self.max_years
        if not math.isfinite(magnitude) or magnitude > limit:
            raise MagnitudeUnsafe(
                f"{magnitude:.3g} years exceeds the limit of {limit:.3g}"
            )

        scaled, unit = _scale(magnitude)
        if round(scaled, 2) >= 1000:
            # Only reachable at the largest unit
            raise MagnitudeUnsafe(f"{magnitude:.3g} years is beyond the unit table")

        direction = "ago" if value.millis < 0 else "from now"
        if unit:
            return f"{scaled:.2f} {unit} years {direction}"
        return f"{scaled:.2f} years {direction}"
