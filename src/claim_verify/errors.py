"""Exception hierarchy for claim verification failures."""

from __future__ import annotations

__all__ = [
    "ClaimVerifyError",
    "KeyDecodeError",
    "MalformedFieldError",
    "MissingArgumentsError",
    "SignatureMismatchError",
]


class ClaimVerifyError(Exception):
    """Base class for all claim verification errors."""


class MissingArgumentsError(ClaimVerifyError):
    """Raised by the command line shell when the argument count is wrong."""

    def __init__(self, received: int, expected: int = 4) -> None:
        super().__init__(f"Expected {expected} arguments, received {received}")
        self.received = received
        self.expected = expected


class MalformedFieldError(ClaimVerifyError):
    """A field has the wrong length or contains non-hex characters."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field {field!r} is malformed")
        self.field = field


class KeyDecodeError(ClaimVerifyError):
    """Public key bytes do not decode to a valid Ed25519 point."""


class SignatureMismatchError(ClaimVerifyError):
    """A well-formed signature failed the verification equation."""

    def __init__(self, stage: str) -> None:
        super().__init__(f"Signature mismatch at stage {stage!r}")
        self.stage = stage
