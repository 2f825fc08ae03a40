"""
Base64url alphabet tables (RFC 4648 section 5).

All tables are built once at import time and never mutated.
"""
from typing import Tuple


ALPHABET: bytes = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789"
    b"-_"
)

# Marker in REVERSE for bytes outside the alphabet
INVALID = -1


def _build_reverse() -> Tuple[int, ...]:
    table = [INVALID] * 256
    for index, symbol in enumerate(ALPHABET):
        table[symbol] = index
    return tuple(table)


# byte value -> 6-bit value, INVALID for anything else
REVERSE: Tuple[int, ...] = _build_reverse()


def is_symbol(byte: int) -> bool:
    """Return True if ``byte`` is one of the 64 base64url symbols."""
    return REVERSE[byte] != INVALID
