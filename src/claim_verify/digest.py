"""Blake2b-512 message digests."""

from __future__ import annotations

import hashlib
from enum import Enum

from .canonical import decode_hex
from .constants import DIGEST_SIZE

__all__ = ["MessageEncoding", "digest", "message_bytes"]


class MessageEncoding(str, Enum):
    """How a message string is turned into bytes before hashing."""

    RAW_BYTES = "hex"
    UTF8_TEXT = "utf8"


def message_bytes(message: str | bytes, encoding: MessageEncoding) -> bytes:
    """Return the byte form of ``message`` for the given encoding.

    Raises:
        MalformedFieldError: when a ``RAW_BYTES`` message is not valid hex.
    """

    if isinstance(message, bytes):
        return message
    if encoding is MessageEncoding.RAW_BYTES:
        return decode_hex(message, field="message")
    return message.encode("utf-8")


def digest(message: str | bytes, encoding: MessageEncoding) -> bytes:
    """Compute the unkeyed 64-byte Blake2b digest of ``message``."""

    hasher = hashlib.blake2b(digest_size=DIGEST_SIZE)
    hasher.update(message_bytes(message, encoding))
    return hasher.digest()
