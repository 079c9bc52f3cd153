"""Millisecond-offset timestamps with a signed 128-bit range.

A ``Geotime`` counts milliseconds from the Unix epoch
(1970-01-01T00:00:00Z). Negative values lie before the epoch. Every integer
in ``[-2**127, 2**127 - 1]`` is a valid timestamp, which is enough to place
events anywhere from the Big Bang to far beyond the end of the Sun.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from geotime.errors import CalendarOutOfRange

I128_MIN = -(1 << 127)
I128_MAX = (1 << 127) - 1
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

MILLIS_PER_SECOND = 1_000
MILLIS_PER_DAY = 86_400 * MILLIS_PER_SECOND


def _datetime_to_millis(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    delta = dt - EPOCH
    # timedelta normalizes microseconds to [0, 1e6), so this floors
    return (delta.days * 86_400 + delta.seconds) * MILLIS_PER_SECOND + (
        delta.microseconds // 1_000
    )


# Range the stdlib datetime type can represent (years 1 through 9999)
DATETIME_MIN_MILLIS = _datetime_to_millis(datetime.min)
DATETIME_MAX_MILLIS = _datetime_to_millis(datetime.max)


@dataclass(frozen=True, order=True, slots=True)
class Geotime:
    """An instant as a signed 128-bit count of milliseconds since the epoch.

    Instances are immutable and ordered by their offset. Arithmetic is done
    on ``millis`` (or ``int(ts)``) with ordinary Python integers.

    Example:
        >>> Geotime(0).to_datetime().isoformat()
        '1970-01-01T00:00:00+00:00'
    """

    millis: int

    MIN: ClassVar[Geotime]
    MAX: ClassVar[Geotime]

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise TypeError(
                f"Geotime requires an integer millisecond offset, "
                f"got {type(self.millis).__name__}"
            )
        if not I128_MIN <= self.millis <= I128_MAX:
            raise ValueError(
                f"Millisecond offset {self.millis} is outside the signed 128-bit range"
            )

    def __int__(self) -> int:
        return self.millis

    def __repr__(self) -> str:
        return f"Geotime({self.millis})"

    @classmethod
    def from_datetime(cls, dt: datetime) -> Geotime:
        """Create a timestamp from a calendar value.

        Naive datetimes are interpreted as UTC. Sub-millisecond precision is
        dropped, rounding toward negative infinity.
        """
        return cls(_datetime_to_millis(dt))

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime.

        Raises:
            CalendarOutOfRange: If the instant falls outside years 1..9999.
        """
        if not DATETIME_MIN_MILLIS <= self.millis <= DATETIME_MAX_MILLIS:
            raise CalendarOutOfRange(f"{self!r} is outside the datetime range")
        return EPOCH + timedelta(milliseconds=self.millis)

    def timestamp_millis(self) -> int:
        """Return the offset as a signed 64-bit millisecond count.

        Raises:
            OverflowError: If the offset does not fit in 64 bits.
        """
        if not I64_MIN <= self.millis <= I64_MAX:
            raise OverflowError(f"{self!r} does not fit in a signed 64-bit integer")
        return self.millis

    # =========================================================================
    # pydantic integration
    # =========================================================================

    @classmethod
    def coerce(cls, value: Any) -> Geotime:
        """Convert a Geotime, integer offset or datetime into a Geotime.

        Used as the pydantic validator, so unsupported input types raise
        ``ValueError`` (which pydantic reports as a ValidationError) rather
        than the ``TypeError`` the constructor raises.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, datetime):
            return cls.from_datetime(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Cannot interpret {type(value).__name__} as a Geotime")
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                int, return_schema=core_schema.int_schema()
            ),
        )


Geotime.MIN = Geotime(I128_MIN)
Geotime.MAX = Geotime(I128_MAX)
