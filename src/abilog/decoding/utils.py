"""Decoding utilities: hex <-> bytes for topics and data, value formatting."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from eth_utils import decode_hex, encode_hex


def _strip_0x(value: str) -> str:
    h = value.strip()
    return h[2:] if h[:2].lower() == "0x" else h


def hex_to_bytes(value: str | bytes) -> bytes:
    """Parse a 0x-prefixed (or bare) hex byte string; bytes pass through.

    Odd-length input raises ValueError: it cannot be split into bytes without
    shifting every byte by half.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    h = _strip_0x(value)
    if len(h) % 2:
        raise ValueError(f"Odd-length hex data: {value!r}")
    return decode_hex(h) if h else b""


def quantity_to_bytes(value: str | bytes) -> bytes:
    """Parse a hex quantity such as "0x999"; an odd leading nibble is zero-filled."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    h = _strip_0x(value)
    if len(h) % 2:
        h = "0" + h
    return decode_hex(h) if h else b""


def topics_to_bytes(topics: Iterable[str | bytes], *, pad: bool = False) -> list[bytes]:
    """Parse hex topics; with `pad`, left-pad short ones to 32 bytes."""
    out: list[bytes] = []
    for t in topics:
        b = quantity_to_bytes(t)
        if pad and len(b) < 32:
            b = b.rjust(32, b"\x00")
        out.append(b)
    return out


def format_value(value: Any) -> Any:
    """Render a decoded value for display: bytes as 0x-hex, containers recursively."""
    if isinstance(value, (bytes, bytearray)):
        return encode_hex(value)
    if isinstance(value, (list, tuple)):
        return [format_value(v) for v in value]
    return value
