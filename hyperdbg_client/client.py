"""HTTP client for the debugger server and parsing of its plain-text replies."""

from __future__ import annotations

import math
import re
import struct
import urllib.error
import urllib.request
from enum import Enum
from typing import Any, Mapping
from urllib.parse import quote

DEFAULT_SERVER = "http://127.0.0.1:8888/"
DEFAULT_TIMEOUT = 15.0


class ValueKind(Enum):
    """The type a server reply is decoded into."""

    BOOL = "bool"
    BYTES = "bytes"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    VOID = "void"


# kind -> (signed, bit size)
_INTEGER_KINDS: dict[ValueKind, tuple[bool, int]] = {
    ValueKind.INT: (True, 64),
    ValueKind.INT8: (True, 8),
    ValueKind.INT16: (True, 16),
    ValueKind.INT32: (True, 32),
    ValueKind.INT64: (True, 64),
    ValueKind.UINT: (False, 64),
    ValueKind.UINT8: (False, 8),
    ValueKind.UINT16: (False, 16),
    ValueKind.UINT32: (False, 32),
    ValueKind.UINT64: (False, 64),
    ValueKind.UINTPTR: (False, 64),
}

_DIGITS = {10: "[0-9]+", 16: "[0-9a-fA-F]+"}
_HEX_TEXT = re.compile(r"(?:[0-9a-fA-F]{2})*")


class ServerError(Exception):
    """The server answered with a status other than 200."""

    def __init__(self, status: int, body: str, url: str) -> None:
        super().__init__(f"Error {status}: {body} ---> {url}")
        self.status = status
        self.body = body
        self.url = url


def _parse_int(text: str, base: int, signed: bool, bits: int) -> int:
    sign = "[+-]?" if signed else ""
    if not re.fullmatch(sign + _DIGITS[base], text):
        raise ValueError(f"invalid {'signed' if signed else 'unsigned'} integer: {text!r}")
    value = int(text, base)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        raise ValueError(f"value out of range for {bits}-bit integer: {text!r}")
    return value


def _parse_float(text: str, bits: int) -> float:
    if "_" in text:
        raise ValueError(f"invalid float: {text!r}")
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"invalid float: {text!r}") from None
    if math.isinf(value) and text.lstrip("+-").lower() not in ("inf", "infinity"):
        raise ValueError(f"value out of range for float{bits}: {text!r}")
    if bits == 32 and math.isfinite(value):
        try:
            (value,) = struct.unpack("<f", struct.pack("<f", value))
        except OverflowError:
            raise ValueError(f"value out of range for float32: {text!r}") from None
    return value


def parse_value(text: str, kind: ValueKind) -> Any:
    """Decode a server reply body as *kind*.

    Surrounding whitespace is dropped, and a leading ``0x`` both selects base 16
    for integers and is removed from the text.
    """
    text = text.strip()
    base = 16 if text.startswith("0x") else 10
    text = text.removeprefix("0x")

    if kind is ValueKind.BOOL:
        if text.lower() == "true":
            return True
        if text.lower() == "false":
            return False
        raise ValueError(f"not a boolean reply: {text!r}")
    if kind is ValueKind.BYTES:
        if len(text) % 2:
            raise ValueError(f"odd length hex string: {text!r}")
        if not _HEX_TEXT.fullmatch(text):
            raise ValueError(f"invalid byte in hex string: {text!r}")
        return bytes.fromhex(text)
    if kind in _INTEGER_KINDS:
        signed, bits = _INTEGER_KINDS[kind]
        return _parse_int(text, base, signed, bits)
    if kind is ValueKind.FLOAT32:
        return _parse_float(text, 32)
    if kind is ValueKind.FLOAT64:
        return _parse_float(text, 64)
    if kind is ValueKind.STRING:
        return text
    if kind is ValueKind.VOID:
        return None
    raise TypeError(f"unsupported value kind: {kind!r}")


def build_url(base_url: str, endpoint: str, params: Mapping[str, str] | None = None) -> str:
    """Join *base_url* and *endpoint* and append *params* as a query string."""
    url = base_url + endpoint
    if params:
        query = "&".join(
            f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
            for key, value in params.items()
        )
        url += "?" + query
    return url


class Client:
    """Sends GET requests to the debugger server and decodes the replies."""

    def __init__(self, base_url: str = DEFAULT_SERVER, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def get(self, endpoint: str, params: Mapping[str, str] | None = None) -> str:
        """Fetch *endpoint* and return the reply body; raise ServerError unless the status is 200."""
        url = build_url(self.base_url, endpoint, params)
        req = urllib.request.Request(url, headers={"Connection": "close"})
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                status = resp.status
                raw = resp.read()
        except urllib.error.HTTPError as err:
            status = err.code
            raw = err.read()
            err.close()
        body = raw.decode("utf-8", "surrogateescape")
        if status != 200:
            raise ServerError(status, body, url)
        return body

    def request(
        self,
        endpoint: str,
        params: Mapping[str, str] | None = None,
        kind: ValueKind = ValueKind.STRING,
    ) -> Any:
        """Fetch *endpoint* and decode the reply as *kind*."""
        return parse_value(self.get(endpoint, params), kind)