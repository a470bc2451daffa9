"""Base-62 codec for the service's public numeric identifiers.

The alphabet order is part of the wire contract: ``0-9`` map to 0-9, ``A-Z`` to
10-35 and ``a-z`` to 36-61. Digits are written most-significant first with no
padding and no separators.
"""

from __future__ import annotations

import dataclasses
import string
from typing import Any, Final

from modrinth_client.kernel.errors import EncodingError

ALPHABET: Final = string.digits + string.ascii_uppercase + string.ascii_lowercase
BASE: Final = len(ALPHABET)
MAX_VALUE: Final = 2**64 - 1

_DIGIT_VALUES: Final = {char: index for index, char in enumerate(ALPHABET)}


def encode(value: int) -> str:
    """Encode an unsigned 64-bit integer as a base-62 string."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"Cannot base62-encode non-integer value {value!r}")
    if value < 0 or value > MAX_VALUE:
        raise EncodingError(
            f"Value {value} is outside the unsigned 64-bit range",
            detail={"value": value},
        )
    if value == 0:
        return ALPHABET[0]

    digits: list[str] = []
    while value:
        value, remainder = divmod(value, BASE)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def decode(text: str) -> int:
    """Decode a base-62 string into an unsigned 64-bit integer.

    Raises:
        EncodingError: on an empty string, a character outside the alphabet,
            or a value that does not fit in 64 bits.
    """
    if not text:
        raise EncodingError("Cannot base62-decode an empty string")

    value = 0
    for position, char in enumerate(text):
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            raise EncodingError(
                f"Invalid base62 character {char!r} at position {position} in {text!r}",
                detail={"text": text, "position": position},
            )
        value = value * BASE + digit
        if value > MAX_VALUE:
            raise EncodingError(
                f"Base62 value {text!r} overflows 64 bits",
                detail={"text": text},
            )
    return value


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class Base62Id:
    """Numeric database identifier exposed on the wire as a base-62 string.

    Examples::

        pid = Base62Id.from_str("AABBCCDD")   # from the wire form
        pid = Base62Id(1234)                  # from the numeric value
        str(pid)                              # back to the wire form
    """

    value: int

    def __post_init__(self) -> None:
        # Validates range and type eagerly.
        encode(self.value)

    def __str__(self) -> str:
        return encode(self.value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_str(cls, text: str) -> "Base62Id":
        """Construct from the wire representation."""
        return cls(decode(text))

    @classmethod
    def _coerce(cls, raw: Any) -> "Base62Id":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            return cls.from_str(raw)
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cls(raw)
        raise EncodingError(f"Expected a base62 string, got {type(raw).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


__all__ = ["ALPHABET", "BASE", "Base62Id", "MAX_VALUE", "decode", "encode"]
