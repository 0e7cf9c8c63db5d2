"""Hex encoding helpers accepting an optional ``0x`` prefix."""

from __future__ import annotations


def strip_0x(text: str) -> str:
    """Return ``text`` without a leading ``0x``/``0X`` prefix."""
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text


def decode_hex(text: str) -> bytes:
    """Decode hexadecimal text, tolerating surrounding whitespace and ``0x``.

    Raises:
        ValueError: If ``text`` is not valid hexadecimal
    """
    return bytes.fromhex(strip_0x(text.strip()))


def encode_hex(data: bytes, *, prefix: bool = True) -> str:
    """Encode ``data`` as lowercase hex, ``0x``-prefixed by default."""
    encoded = bytes(data).hex()
    return f"0x{encoded}" if prefix else encoded
