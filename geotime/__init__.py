"""Geotime: millisecond timestamps spanning the signed 128-bit range.

Provides order-preserving fixed-width string encodings and tiered
human-readable rendering.
"""

from geotime.codecs import (
    CODECS,
    LEXICAL_BASE32HEX,
    LEXICAL_BASE64,
    LEXICAL_GEOHASH,
    LEXICAL_HEX,
    LexicalAlphabet,
    LexicalCodec,
    get_codec,
)
from geotime.errors import (
    CalendarError,
    CalendarOutOfRange,
    DecodeError,
    InvalidPattern,
    MagnitudeUnsafe,
)
from geotime.magnitude import MILLIS_PER_YEAR, MagnitudeFormatter
from geotime.rendering import DisplayPipeline, FormatTier, Rendering, display
from geotime.serialization import (
    LexicalBase32Hex,
    LexicalBase64,
    LexicalGeohash,
    LexicalHex,
)
from geotime.timestamp import Geotime

__version__ = "0.1.0"

__all__ = [
    "CODECS",
    "LEXICAL_BASE32HEX",
    "LEXICAL_BASE64",
    "LEXICAL_GEOHASH",
    "LEXICAL_HEX",
    "MILLIS_PER_YEAR",
    "CalendarError",
    "CalendarOutOfRange",
    "DecodeError",
    "DisplayPipeline",
    "FormatTier",
    "Geotime",
    "InvalidPattern",
    "LexicalAlphabet",
    "LexicalBase32Hex",
    "LexicalBase64",
    "LexicalCodec",
    "LexicalGeohash",
    "LexicalHex",
    "MagnitudeFormatter",
    "MagnitudeUnsafe",
    "Rendering",
    "display",
    "get_codec",
]
