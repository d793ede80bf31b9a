"""Pydantic models describing claims and verification reports."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    ADDRESS_HEX_LENGTH,
    PUBLIC_KEY_HEX_LENGTH,
    SIGNATURE_HEX_LENGTH,
)
from .outcome import Outcome, Stage

__all__ = [
    "CURRENT_REPORT_SCHEMA_VERSION",
    "CanonicalClaim",
    "Claim",
    "VerificationReport",
]

SchemaVersionLiteral = Literal["0.1.0"]
CURRENT_REPORT_SCHEMA_VERSION: SchemaVersionLiteral = "0.1.0"

_HEX_PATTERN = r"^[0-9a-fA-F]*$"


class Claim(BaseModel):
    """Raw, untrusted claim fields exactly as supplied by the caller."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    tzl_public_key: str = Field(
        ...,
        description="Ed25519 public key, hex, optionally 0x-prefixed.",
    )
    eth_address: str = Field(
        ...,
        description="Ethereum address, hex, optionally 0x-prefixed.",
    )
    address_signature: str = Field(
        ...,
        description="Signature over the Blake2b digest of the address bytes.",
    )
    declaration_signature: str = Field(
        ...,
        description="Signature over the Blake2b digest of the declaration text.",
    )


class CanonicalClaim(BaseModel):
    """Claim fields after prefix removal, length and hex checks."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tzl_public_key: str = Field(
        ...,
        min_length=PUBLIC_KEY_HEX_LENGTH,
        max_length=PUBLIC_KEY_HEX_LENGTH,
        pattern=_HEX_PATTERN,
    )
    eth_address: str = Field(
        ...,
        min_length=ADDRESS_HEX_LENGTH,
        max_length=ADDRESS_HEX_LENGTH,
        pattern=_HEX_PATTERN,
    )
    address_signature: str = Field(
        ...,
        min_length=SIGNATURE_HEX_LENGTH,
        max_length=SIGNATURE_HEX_LENGTH,
        pattern=_HEX_PATTERN,
    )
    declaration_signature: str = Field(
        ...,
        min_length=SIGNATURE_HEX_LENGTH,
        max_length=SIGNATURE_HEX_LENGTH,
        pattern=_HEX_PATTERN,
    )


class VerificationReport(BaseModel):
    """Immutable summary of one verification run.

    Carries only the outcome and the stage that produced it; no key,
    signature or digest material is ever included.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: SchemaVersionLiteral = Field(
        default=CURRENT_REPORT_SCHEMA_VERSION,
        description="Semantic version of the report schema.",
    )
    outcome: Outcome = Field(..., description="Terminal outcome of the run.")
    stage: Stage = Field(
        ...,
        description="Stage that failed, or 'complete' on success.",
    )

    @property
    def ok(self) -> bool:
        """Return ``True`` when both signatures verified."""

        return self.outcome is Outcome.SUCCESS
