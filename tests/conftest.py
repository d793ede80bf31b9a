"""Pytest configuration and fixtures."""

from __future__ import annotations

import hashlib
import os
import sys
from dataclasses import dataclass

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

# Ensure src/ is on sys.path for tests so the src layout is used during test runs
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from claim_verify.constants import DECLARATION  # noqa: E402

# Deterministic key material for reproducible signatures; test use only.
SEED_0 = bytes.fromhex(
    "9f2c4b7a1d08e3f5a6b0c3d4e7f812349abcedf00123456789abcdef01234567"
)
SEED_1 = bytes(range(32))
ETH_ADDRESS = "52908400098527886e0f7030069857d2e4169ee7"


def blake2b_512(data: bytes) -> bytes:
    """Reference Blake2b-512 used to build signed messages."""
    return hashlib.blake2b(data, digest_size=64).digest()


@dataclass(frozen=True)
class ReferenceSigner:
    """Ed25519 signer producing hex fields the way a claimant would."""

    seed: bytes

    @property
    def _key(self) -> Ed25519PrivateKey:
        return Ed25519PrivateKey.from_private_bytes(self.seed)

    @property
    def public_key_hex(self) -> str:
        raw = self._key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return raw.hex()

    def sign(self, message: bytes) -> str:
        """Sign the Blake2b-512 digest of ``message``."""
        return self._key.sign(blake2b_512(message)).hex()

    def sign_address(self, address_hex: str) -> str:
        return self.sign(bytes.fromhex(address_hex))

    def sign_declaration(self, text: str = DECLARATION) -> str:
        return self.sign(text.encode("utf-8"))


@pytest.fixture
def signer() -> ReferenceSigner:
    return ReferenceSigner(SEED_0)


@pytest.fixture
def other_signer() -> ReferenceSigner:
    return ReferenceSigner(SEED_1)


@pytest.fixture
def claim_fields(signer: ReferenceSigner) -> list[str]:
    """Four mutually consistent claim fields, without prefixes."""
    return [
        signer.public_key_hex,
        ETH_ADDRESS,
        signer.sign_address(ETH_ADDRESS),
        signer.sign_declaration(),
    ]
