"""Terminal outcomes and stages of a claim verification run."""

from __future__ import annotations

from enum import Enum

__all__ = ["Outcome", "Stage"]


class Outcome(str, Enum):
    """Result of a full verification run, consumed by the command line shell."""

    INVALID_INPUT = "invalid_input"
    ADDRESS_SIGNATURE_INVALID = "address_signature_invalid"
    DECLARATION_SIGNATURE_INVALID = "declaration_signature_invalid"
    SUCCESS = "success"
    INTERNAL_ERROR = "internal_error"


class Stage(str, Enum):
    """Pipeline stage at which a run terminated."""

    INPUT = "input"
    ADDRESS_SIGNATURE = "address_signature"
    DECLARATION_SIGNATURE = "declaration_signature"
    COMPLETE = "complete"
    INTERNAL = "internal"
