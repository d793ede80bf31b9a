"""Hex canonicalization helpers.

Inputs arrive as untrusted strings. :func:`canonicalize` only strips the
optional ``0x`` prefix and checks the exact length; character validity is
left to :func:`decode_hex`, which fails closed.
"""

from __future__ import annotations

import string

from .constants import HEX_PREFIX
from .errors import MalformedFieldError

__all__ = ["canonicalize", "decode_hex", "strip_hex_prefix"]

_HEX_DIGITS = frozenset(string.hexdigits)


def strip_hex_prefix(value: str) -> str:
    """Return ``value`` without a single leading ``0x`` marker."""
    if value.startswith(HEX_PREFIX):
        return value[len(HEX_PREFIX) :]
    return value


def canonicalize(value: str, expected_length: int) -> str | None:
    """
    Strip the ``0x`` prefix and enforce an exact character length.

    Returns the canonical string on an exact match and ``None`` otherwise, so
    a stripped but mismatched value is never handed to a caller as a success.
    """
    if not isinstance(value, str):
        return None
    canonical = strip_hex_prefix(value)
    if len(canonical) != expected_length:
        return None
    return canonical


def decode_hex(value: str, field: str = "value") -> bytes:
    """
    Decode a canonical hex string into bytes.

    ``bytes.fromhex`` tolerates embedded whitespace; that is rejected here
    together with any other non-hex character and odd lengths.

    Raises:
        MalformedFieldError: when ``value`` is not strictly hexadecimal.
    """
    if len(value) % 2 or not _HEX_DIGITS.issuperset(value):
        raise MalformedFieldError(field)
    return bytes.fromhex(value)
