"""Order-preserving fixed-width string encodings of Geotime values.

Each codec maps the signed 128-bit offset onto a fixed-width string whose
plain string order (byte-wise, as a database index or object-store listing
would sort it) matches the numeric order of the offsets.

Encoding works in three steps:
1. Bias: add 2**127 so the signed range maps onto ``[0, 2**128)`` without
   changing relative order (equivalent to flipping the two's-complement
   sign bit).
2. Pack: the 128 biased bits fill the high end of a ``bits * width`` field.
   Any remaining low-order padding bits are zero, as in RFC 4648 base32
   without ``=`` padding.
3. Spell: emit ``width`` symbols, most significant first. Each alphabet is
   listed in ascending ASCII order, so symbol order equals digit order.

Because the width is fixed and the padding is always zero, every value has
exactly one encoding and every well-formed string decodes to exactly one
value.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from geotime.errors import DecodeError
from geotime.timestamp import Geotime

VALUE_BITS = 128
BIAS = 1 << (VALUE_BITS - 1)

HEX_SYMBOLS = "0123456789abcdef"
# RFC 4648 "base32hex" (extended hex) alphabet
BASE32HEX_SYMBOLS = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
# Geohash alphabet: digits and lowercase letters without a, i, l, o
GEOHASH_SYMBOLS = "0123456789bcdefghjkmnpqrstuvwxyz"
# Digits, ":", uppercase, "_", lowercase: 64 symbols in ASCII order
BASE64_SYMBOLS = "0123456789:ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class LexicalAlphabet:
    """An ordered symbol set whose index order equals its ASCII order."""

    symbols: str
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        radix = len(self.symbols)
        if radix < 2 or radix & (radix - 1):
            raise ValueError(f"Alphabet size must be a power of two, got {radix}")
        if any(a >= b for a, b in zip(self.symbols, self.symbols[1:])):
            raise ValueError(
                f"Alphabet symbols must be distinct and in ascending order: {self.symbols!r}"
            )
        object.__setattr__(
            self, "_index", {symbol: i for i, symbol in enumerate(self.symbols)}
        )

    @property
    def radix(self) -> int:
        return len(self.symbols)

    @property
    def bits_per_symbol(self) -> int:
        return self.radix.bit_length() - 1

    @property
    def zero(self) -> str:
        return self.symbols[0]

    def index(self, symbol: str) -> int | None:
        """Return the digit value of ``symbol``, or None if it is not in the alphabet."""
        return self._index.get(symbol)


@dataclass(frozen=True)
class LexicalCodec:
    """Fixed-width encoder/decoder for one alphabet.

    Example:
        >>> LEXICAL_HEX.encode(Geotime(-1))
        '7fffffffffffffffffffffffffffffff'
        >>> LEXICAL_HEX.decode('80000000000000000000000000000064')
        Geotime(100)
    """

    name: str
    alphabet: LexicalAlphabet
    width: int

    def __post_init__(self) -> None:
        if self.alphabet.bits_per_symbol * self.width < VALUE_BITS:
            raise ValueError(
                f"{self.width} base-{self.alphabet.radix} digits cannot hold "
                f"{VALUE_BITS} bits"
            )

    @property
    def pad_bits(self) -> int:
        """Number of always-zero low-order bits in the final symbol(s)."""
        return self.alphabet.bits_per_symbol * self.width - VALUE_BITS

    def encode(self, value: Geotime | int) -> str:
        """Encode a timestamp as exactly ``width`` symbols."""
        millis = value.millis if isinstance(value, Geotime) else Geotime(value).millis
        n = (millis + BIAS) << self.pad_bits

        radix = self.alphabet.radix
        symbols = self.alphabet.symbols
        digits: list[str] = []
        while n:
            n, remainder = divmod(n, radix)
            digits.append(symbols[remainder])

        encoded = "".join(reversed(digits))
        return encoded.rjust(self.width, self.alphabet.zero)

    def decode(self, text: str) -> Geotime:
        """Decode a string produced by ``encode``.

        Raises:
            DecodeError: If the length is wrong, a character is outside the
                alphabet, or the padding bits are not zero.
        """
        if len(text) != self.width:
            raise DecodeError(
                f"{self.name}: expected {self.width} characters, got {len(text)}"
            )

        radix = self.alphabet.radix
        n = 0
        for position, char in enumerate(text):
            digit = self.alphabet.index(char)
            if digit is None:
                raise DecodeError(
                    f"{self.name}: invalid character {char!r} at position {position}"
                )
            n = n * radix + digit

        if n & ((1 << self.pad_bits) - 1):
            raise DecodeError(f"{self.name}: non-zero padding bits in {text!r}")

        return Geotime((n >> self.pad_bits) - BIAS)


LEXICAL_HEX = LexicalCodec("hex", LexicalAlphabet(HEX_SYMBOLS), 32)
LEXICAL_BASE32HEX = LexicalCodec("base32hex", LexicalAlphabet(BASE32HEX_SYMBOLS), 26)
LEXICAL_GEOHASH = LexicalCodec("geohash", LexicalAlphabet(GEOHASH_SYMBOLS), 26)
LEXICAL_BASE64 = LexicalCodec("base64", LexicalAlphabet(BASE64_SYMBOLS), 22)

CODECS: dict[str, LexicalCodec] = {
    codec.name: codec
    for codec in (LEXICAL_HEX, LEXICAL_BASE32HEX, LEXICAL_GEOHASH, LEXICAL_BASE64)
}


def get_codec(name: str) -> LexicalCodec:
    """Look up a codec by name ("hex", "base32hex", "geohash" or "base64").

    Raises:
        KeyError: If no codec has that name.
    """
    try:
        return CODECS[name]
    except KeyError:
        raise KeyError(
            f"Unknown codec {name!r}; expected one of {sorted(CODECS)}"
        ) from None
