"""Hex encoding/decoding utilities for Cryptex."""

from __future__ import annotations

import binascii
import re

from ..errors import DecodingError

# Lowercase only, two digits per byte, no separators
_HEX_PATTERN = re.compile(r"(?:[0-9a-f]{2})*")


def to_hex(data: bytes) -> str:
    """Encode bytes to lowercase hex without separators.

    Args:
        data: The bytes to encode.

    Returns:
        Lowercase hex string, two characters per byte.
    """
    return binascii.hexlify(data).decode("ascii")


def from_hex(text: str) -> bytes:
    """Decode a lowercase hex string to bytes.

    Decoding is strict: upper-case digits, whitespace, separators and
    odd-length input are all rejected, so the wire string has exactly one
    valid spelling.

    Args:
        text: The hex string to decode.

    Returns:
        The decoded bytes.

    Raises:
        TypeError: If ``text`` is not a string.
        DecodingError: If ``text`` is not valid lowercase hex.
    """
    if not isinstance(text, str):
        raise TypeError(f"ciphertext must be str, not {type(text).__name__}")
    if _HEX_PATTERN.fullmatch(text) is None:
        raise DecodingError("Decoding failure: ciphertext is not valid hex")
    return binascii.unhexlify(text)
