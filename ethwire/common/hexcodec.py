"""
Hex text <-> bytes / unsigned integer conversion.

Quantities are ``0x``-prefixed base-16 text with no fixed width; byte data is
``0x``-prefixed text with an even digit count. Odd-length byte text is
rejected rather than zero-padded.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, Optional

from ethwire.common.errors import InvalidEncoding

if TYPE_CHECKING:
    from ethwire.rpc.fields import FieldSource

_HEX_DIGITS = frozenset(string.hexdigits)


def strip_hex_prefix(value: str) -> str:
    if value.startswith("0x") or value.startswith("0X"):
        return value[2:]
    return value


def is_hex_digits(value: str) -> bool:
    return all(c in _HEX_DIGITS for c in value)


def hex_to_bytes(value: str, field: Optional[str] = None) -> bytes:
    digits = strip_hex_prefix(value)
    if not is_hex_digits(digits):
        raise InvalidEncoding(f"non-hex characters in {value!r}", field)
    if len(digits) % 2:
        raise InvalidEncoding(f"odd-length hex data {value!r}", field)
    return bytes.fromhex(digits)


def hex_to_int(value: str, field: Optional[str] = None) -> int:
    digits = strip_hex_prefix(value)
    # int(..., 16) alone would accept "+1", " 1" and "1_0"
    if not digits or not is_hex_digits(digits):
        raise InvalidEncoding(f"invalid hex quantity {value!r}", field)
    return int(digits, 16)


def int_to_hex(value: int) -> str:
    if value < 0:
        raise ValueError(f"cannot hex-encode negative quantity {value}")
    return hex(value)


def bytes_to_hex(value: bytes) -> str:
    return "0x" + bytes(value).hex()


# ---------------------------------------------------------------------------
# Field-level helpers
# ---------------------------------------------------------------------------

def decode_bytes(source: FieldSource, name: str, optional: bool = False) -> Optional[bytes]:
    """Decode a hex blob field; ``None`` only when optional and absent."""
    if optional:
        return source.get_optional_blob(name)
    return source.get_blob(name)


def decode_uint(source: FieldSource, name: str, optional: bool = False) -> Optional[int]:
    """Decode a hex quantity field; ``None`` only when optional and absent."""
    if optional:
        text = source.get_optional_string(name)
        if text is None:
            return None
    else:
        text = source.get_string(name)
    return hex_to_int(text, source.path(name))
