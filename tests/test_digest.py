"""Tests for the Blake2b-512 digest engine."""

from __future__ import annotations

import hashlib

import pytest
from hypothesis import given, strategies as st

from claim_verify.constants import DECLARATION, DIGEST_SIZE
from claim_verify.digest import MessageEncoding, digest, message_bytes
from claim_verify.errors import MalformedFieldError

_EMPTY_BLAKE2B_512 = (
    "786a02f742015903c6c6fd852552d272912f4740e15847618a86e217f71f5419"
    "d25e1031afee585313896444934eb04b903a685b1448b755d56f701afe9be2ce"
)


def test_digest_of_empty_message_matches_known_vector() -> None:
    assert digest("", MessageEncoding.UTF8_TEXT).hex() == _EMPTY_BLAKE2B_512
    assert digest("", MessageEncoding.RAW_BYTES).hex() == _EMPTY_BLAKE2B_512


@given(data=st.binary(max_size=256))
def test_digest_is_deterministic_and_64_bytes(data: bytes) -> None:
    first = digest(data.hex(), MessageEncoding.RAW_BYTES)
    second = digest(data.hex(), MessageEncoding.RAW_BYTES)
    assert first == second
    assert len(first) == DIGEST_SIZE
    assert first == hashlib.blake2b(data, digest_size=64).digest()


def test_raw_bytes_decode_hex_not_text() -> None:
    address = "52908400098527886e0f7030069857d2e4169ee7"
    raw = digest(address, MessageEncoding.RAW_BYTES)
    text = digest(address, MessageEncoding.UTF8_TEXT)
    assert raw != text
    assert message_bytes(address, MessageEncoding.RAW_BYTES) == bytes.fromhex(address)


def test_declaration_digest_uses_utf8_bytes() -> None:
    expected = hashlib.blake2b(DECLARATION.encode("utf-8"), digest_size=64).digest()
    assert digest(DECLARATION, MessageEncoding.UTF8_TEXT) == expected


def test_bytes_message_passes_through() -> None:
    assert message_bytes(b"\x00\x01", MessageEncoding.UTF8_TEXT) == b"\x00\x01"


def test_malformed_hex_message_fails() -> None:
    with pytest.raises(MalformedFieldError):
        digest("zz" * 20, MessageEncoding.RAW_BYTES)
