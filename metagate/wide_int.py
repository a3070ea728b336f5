"""Fixed-width 256-bit identifiers assembled from two 128-bit hex halves.

Token ids arrive as a (low, high) pair of hex strings. Both halves are
validated independently; a malformed half is an error, never a zero.
"""
from __future__ import annotations
import logging
import re
from functools import total_ordering
from typing import Union

log = logging.getLogger(__name__)

HALF_BITS = 128
WIDTH_BITS = 256
_HALF_MASK = (1 << HALF_BITS) - 1
_MAX = (1 << WIDTH_BITS) - 1

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


class InvalidHexFormat(ValueError):
    """A hex half could not be parsed or does not fit in 128 bits."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"invalid hex {value!r}: {reason}")
        self.value = value
        self.reason = reason


@total_ordering
class U256:
    """Unsigned 256-bit value. Immutable, compares with other U256 and ints."""

    __slots__ = ("_value",)

    MIN: "U256"
    MAX: "U256"

    def __init__(self, value: int):
        if not 0 <= value <= _MAX:
            raise ValueError(f"value out of 256-bit range: {value}")
        self._value = value

    @classmethod
    def from_halves(cls, low: int, high: int) -> "U256":
        for name, half in (("low", low), ("high", high)):
            if not 0 <= half <= _HALF_MASK:
                raise ValueError(f"{name} half out of 128-bit range: {half}")
        return cls((high << HALF_BITS) | low)

    @property
    def low(self) -> int:
        return self._value & _HALF_MASK

    @property
    def high(self) -> int:
        return self._value >> HALF_BITS

    def to_bytes(self) -> bytes:
        """32 bytes, big-endian."""
        return self._value.to_bytes(WIDTH_BITS // 8, "big")

    def to_hex(self) -> str:
        return "0x" + format(self._value, "064x")

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other) -> bool:
        if isinstance(other, U256):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, U256):
            return self._value < other._value
        if isinstance(other, int):
            return self._value < other
        return NotImplemented

    def __repr__(self) -> str:
        return f"U256({self.to_hex()})"


U256.MIN = U256(0)
U256.MAX = U256(_MAX)


def parse_hex_half(value: str) -> int:
    """Parse one 128-bit half. Accepts an optional 0x/0X marker."""
    digits = value[2:] if value[:2] in ("0x", "0X") else value
    if not digits:
        raise InvalidHexFormat(value, "no digits")
    if not _HEX_RE.fullmatch(digits):
        raise InvalidHexFormat(value, "non-hex characters")
    n = int(digits, 16)
    if n > _HALF_MASK:
        raise InvalidHexFormat(value, f"wider than {HALF_BITS} bits")
    return n


def to_u256(low_hex: str, high_hex: str) -> U256:
    """Compose high_hex (upper 128 bits) and low_hex (lower 128 bits)."""
    low = parse_hex_half(low_hex)
    high = parse_hex_half(high_hex)
    result = U256.from_halves(low, high)
    log.debug("Composed u256 %s from low=%s high=%s", result.to_hex(), low_hex, high_hex)
    return result
