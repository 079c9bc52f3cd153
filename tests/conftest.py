"""Shared fixtures for geotime tests."""

import random

import pytest

from geotime.timestamp import I128_MAX, I128_MIN


def _boundary_offsets() -> list[int]:
    """Offsets around every power of two, plus the range ends and a few
    well-known values."""
    offsets = {I128_MIN, I128_MIN + 1, I128_MAX - 1, I128_MAX, -1, 0, 1, -100, 100}
    for bit in range(127):
        for edge in (1 << bit, -(1 << bit)):
            offsets.update({edge - 1, edge, edge + 1})
    rng = random.Random(20240601)
    offsets.update(rng.randint(I128_MIN, I128_MAX) for _ in range(500))
    return sorted(o for o in offsets if I128_MIN <= o <= I128_MAX)


@pytest.fixture(scope="session")
def sample_offsets() -> list[int]:
    """Sorted, distinct offsets spanning the whole signed 128-bit range."""
    return _boundary_offsets()
