"""Claim Verify - Ed25519 verification of Ethereum address and declaration claims."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "DECLARATION",
    "Claim",
    "ClaimVerifier",
    "Outcome",
    "VerificationReport",
    "canonicalize",
    "run_verification",
    "verify",
]

if TYPE_CHECKING:
    from .canonical import canonicalize
    from .constants import DECLARATION
    from .outcome import Outcome
    from .schemas import Claim, VerificationReport
    from .verifier import ClaimVerifier, run_verification, verify


def __getattr__(name: str) -> Any:
    """Lazily import modules to avoid eager dependency loading."""

    module_map = {
        "DECLARATION": "constants",
        "Claim": "schemas",
        "ClaimVerifier": "verifier",
        "Outcome": "outcome",
        "VerificationReport": "schemas",
        "canonicalize": "canonical",
        "run_verification": "verifier",
        "verify": "verifier",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
