"""Helpers for JSON scalars that the debugger server writes as hex strings."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)
_UINT64_MAX = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _unwrap(data: bytes | bytearray | str) -> str:
    """Strip surrounding JSON quotes and a leading ``0x`` from *data*."""
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    return text.strip('"').removeprefix("0x")


def _parse_digits(digits: str, original: bytes | bytearray | str) -> int:
    if not digits or not _HEX_DIGITS.issuperset(digits):
        raise ValueError(f"invalid hexadecimal number: {original!r}")
    return int(digits, 16)


def decode_hex_uint64(data: bytes | bytearray | str) -> int:
    """Decode a quoted or bare hex number into an unsigned 64-bit integer."""
    value = _parse_digits(_unwrap(data), data)
    if value > _UINT64_MAX:
        raise ValueError(f"value out of range for uint64: {data!r}")
    return value


def encode_hex_uint64(value: int) -> str:
    """Encode an unsigned 64-bit integer as a quoted ``0x``-prefixed JSON string."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value out of range for uint64: {value}")
    return f'"0x{value:x}"'


def decode_hex_int(data: bytes | bytearray | str) -> int:
    """Decode a signed 64-bit hex number and return it as a machine-word unsigned value."""
    text = _unwrap(data)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    value = sign * _parse_digits(text, data)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range for int64: {data!r}")
    return value & _UINT64_MAX


def decode_hex_bytes(data: bytes | bytearray | str) -> bytes:
    """Decode a quoted or bare hex string into raw bytes."""
    text = _unwrap(data)
    if len(text) % 2:
        raise ValueError(f"odd length hex string: {data!r}")
    if not _HEX_DIGITS.issuperset(text):
        raise ValueError(f"invalid byte in hex string: {data!r}")
    return bytes.fromhex(text)


def decode_hex_string(data: bytes | bytearray | str) -> str:
    """Decode a quoted or bare hex string into text, keeping undecodable bytes."""
    return decode_hex_bytes(data).decode("utf-8", "surrogateescape")