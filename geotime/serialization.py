"""pydantic field types that store Geotime values in lexical encodings.

Use these as model field annotations when a model is persisted somewhere
that sorts by string, e.g. object-store keys or document database ids:

    class Event(BaseModel):
        at: LexicalHex

    Event(at=Geotime(-100)).model_dump()
    # {'at': '7fffffffffffffffffffffffffffff9c'}

Validation accepts the encoded string or anything a plain ``Geotime``
field accepts (Geotime, int, datetime).
"""

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from geotime.codecs import (
    LEXICAL_BASE32HEX,
    LEXICAL_BASE64,
    LEXICAL_GEOHASH,
    LEXICAL_HEX,
    LexicalCodec,
)
from geotime.timestamp import Geotime


def _decoder(codec: LexicalCodec) -> Callable[[Any], Any]:
    def decode(value: Any) -> Any:
        # DecodeError is a ValueError, so pydantic reports it as a ValidationError
        if isinstance(value, str):
            return codec.decode(value)
        return value

    return decode


LexicalHex = Annotated[
    Geotime,
    BeforeValidator(_decoder(LEXICAL_HEX)),
    PlainSerializer(LEXICAL_HEX.encode, return_type=str),
]

LexicalBase32Hex = Annotated[
    Geotime,
    BeforeValidator(_decoder(LEXICAL_BASE32HEX)),
    PlainSerializer(LEXICAL_BASE32HEX.encode, return_type=str),
]

LexicalGeohash = Annotated[
    Geotime,
    BeforeValidator(_decoder(LEXICAL_GEOHASH)),
    PlainSerializer(LEXICAL_GEOHASH.encode, return_type=str),
]

LexicalBase64 = Annotated[
    Geotime,
    BeforeValidator(_decoder(LEXICAL_BASE64)),
    PlainSerializer(LEXICAL_BASE64.encode, return_type=str),
]
