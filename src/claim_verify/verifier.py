"""
Ed25519 verification of address and declaration claims.

A claim binds one Ed25519 public key to an Ethereum address and to the fixed
declaration text through two signatures, each made over a Blake2b-512
digest. Verification runs as a short-circuiting pipeline:

    input canonicalized -> address signature -> declaration signature

and terminates on the first failing stage. Every failure below the input
stage collapses into that stage's ``False`` result so callers cannot learn
why a signature was rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from .canonical import canonicalize, decode_hex
from .constants import (
    ADDRESS_HEX_LENGTH,
    DECLARATION,
    PUBLIC_KEY_HEX_LENGTH,
    SIGNATURE_HEX_LENGTH,
)
from .digest import MessageEncoding, digest
from .errors import KeyDecodeError, MalformedFieldError, SignatureMismatchError
from .outcome import Outcome, Stage
from .schemas import CanonicalClaim, Claim, VerificationReport

__all__ = [
    "ClaimVerifier",
    "Outcome",
    "Stage",
    "canonicalize_claim",
    "load_public_key",
    "run_verification",
    "verify",
    "verify_digest",
]

LOGGER = logging.getLogger(__name__)

_FIELD_LENGTHS: tuple[tuple[str, int], ...] = (
    ("tzl_public_key", PUBLIC_KEY_HEX_LENGTH),
    ("eth_address", ADDRESS_HEX_LENGTH),
    ("address_signature", SIGNATURE_HEX_LENGTH),
    ("declaration_signature", SIGNATURE_HEX_LENGTH),
)


def load_public_key(public_key_hex: str) -> Ed25519PublicKey:
    """
    Parse a canonical hex public key into an Ed25519 key object.

    Raises:
        KeyDecodeError: when the hex is malformed or the bytes are rejected
            as an Ed25519 public key.
    """
    try:
        raw = decode_hex(public_key_hex, field="tzl_public_key")
        return Ed25519PublicKey.from_public_bytes(raw)
    except (MalformedFieldError, ValueError) as exc:
        raise KeyDecodeError("Public key does not decode to an Ed25519 point") from exc


def verify_digest(signature_hex: str, message: bytes, public_key_hex: str) -> bool:
    """
    Check an Ed25519 signature over ``message`` (normally a 64-byte digest).

    Fails closed: malformed hex, an undecodable key, a structurally invalid
    signature and a failed verification equation all return ``False``.
    """
    try:
        key = load_public_key(public_key_hex)
        signature = decode_hex(signature_hex, field="signature")
        key.verify(signature, message)
    except KeyDecodeError:
        LOGGER.debug("Signature check rejected: public key decode failure")
        return False
    except MalformedFieldError:
        LOGGER.debug("Signature check rejected: malformed signature encoding")
        return False
    except (InvalidSignature, ValueError):
        LOGGER.debug("Signature check rejected: verification equation failed")
        return False
    return True


def verify(
    signature_hex: str,
    message: str | bytes,
    public_key_hex: str,
    encoding: MessageEncoding,
) -> bool:
    """Digest ``message`` with Blake2b-512 and verify ``signature_hex`` over it."""
    try:
        message_digest = digest(message, encoding)
    except MalformedFieldError:
        LOGGER.debug("Signature check rejected: message is not valid hex")
        return False
    return verify_digest(signature_hex, message_digest, public_key_hex)


def canonicalize_claim(claim: Claim) -> CanonicalClaim:
    """
    Canonicalize every claim field and confirm it is strictly hexadecimal.

    Raises:
        MalformedFieldError: naming the first field that fails.
    """
    values: dict[str, str] = {}
    for name, length in _FIELD_LENGTHS:
        canonical = canonicalize(getattr(claim, name), length)
        if canonical is None:
            raise MalformedFieldError(name)
        decode_hex(canonical, field=name)
        values[name] = canonical
    return CanonicalClaim(**values)


@dataclass(slots=True)
class ClaimVerifier:
    """Run the verification pipeline for a claim.

    Instances hold no per-run state and may be shared between threads.

    Attributes:
        logger: Logger receiving stage-level diagnostics. Records never
            contain key, signature or digest material.
    """

    logger: logging.Logger = field(default=LOGGER)

    def run(self, claim: Claim) -> VerificationReport:
        """Verify ``claim`` and return a report tagged with the terminal stage."""
        try:
            return self._run(claim)
        except Exception as exc:
            self.logger.error(
                "Unexpected failure during claim verification",
                extra={"stage": Stage.INTERNAL.value, "error_type": type(exc).__name__},
            )
            return VerificationReport(
                outcome=Outcome.INTERNAL_ERROR, stage=Stage.INTERNAL
            )

    def _run(self, claim: Claim) -> VerificationReport:
        try:
            canonical = canonicalize_claim(claim)
        except MalformedFieldError as exc:
            self.logger.info(
                "Claim rejected: malformed input",
                extra={"stage": Stage.INPUT.value, "field": exc.field},
            )
            return VerificationReport(outcome=Outcome.INVALID_INPUT, stage=Stage.INPUT)

        try:
            self._check(
                Stage.ADDRESS_SIGNATURE,
                canonical.address_signature,
                digest(canonical.eth_address, MessageEncoding.RAW_BYTES),
                canonical.tzl_public_key,
            )
        except SignatureMismatchError:
            return VerificationReport(
                outcome=Outcome.ADDRESS_SIGNATURE_INVALID,
                stage=Stage.ADDRESS_SIGNATURE,
            )

        try:
            self._check(
                Stage.DECLARATION_SIGNATURE,
                canonical.declaration_signature,
                digest(DECLARATION, MessageEncoding.UTF8_TEXT),
                canonical.tzl_public_key,
            )
        except SignatureMismatchError:
            return VerificationReport(
                outcome=Outcome.DECLARATION_SIGNATURE_INVALID,
                stage=Stage.DECLARATION_SIGNATURE,
            )

        self.logger.info("Claim verified", extra={"stage": Stage.COMPLETE.value})
        return VerificationReport(outcome=Outcome.SUCCESS, stage=Stage.COMPLETE)

    def _check(
        self, stage: Stage, signature_hex: str, message_digest: bytes, public_key_hex: str
    ) -> None:
        if not verify_digest(signature_hex, message_digest, public_key_hex):
            self.logger.info(
                "Claim rejected: signature mismatch", extra={"stage": stage.value}
            )
            raise SignatureMismatchError(stage.value)


def run_verification(
    tzl_public_key: str,
    eth_address: str,
    address_signature: str,
    declaration_signature: str,
) -> Outcome:
    """Verify the four raw claim arguments and return the terminal outcome."""
    try:
        claim = Claim(
            tzl_public_key=tzl_public_key,
            eth_address=eth_address,
            address_signature=address_signature,
            declaration_signature=declaration_signature,
        )
    except ValueError:
        # pydantic rejects non-string arguments
        return Outcome.INVALID_INPUT
    return ClaimVerifier().run(claim).outcome
