"""Tests for claim and report models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from claim_verify.outcome import Outcome, Stage
from claim_verify.schemas import (
    CURRENT_REPORT_SCHEMA_VERSION,
    CanonicalClaim,
    Claim,
    VerificationReport,
)


def test_claim_is_frozen_and_strict() -> None:
    claim = Claim(
        tzl_public_key="a", eth_address="b", address_signature="c", declaration_signature="d"
    )
    with pytest.raises(ValidationError):
        claim.eth_address = "x"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        Claim.model_validate(
            {
                "tzl_public_key": "a",
                "eth_address": "b",
                "address_signature": "c",
                "declaration_signature": "d",
                "note": "unexpected",
            }
        )


def test_canonical_claim_enforces_lengths_and_hex() -> None:
    valid = {
        "tzl_public_key": "ab" * 32,
        "eth_address": "cd" * 20,
        "address_signature": "ef" * 64,
        "declaration_signature": "01" * 64,
    }
    CanonicalClaim(**valid)

    with pytest.raises(ValidationError):
        CanonicalClaim(**{**valid, "eth_address": "cd" * 19})
    with pytest.raises(ValidationError):
        CanonicalClaim(**{**valid, "tzl_public_key": "zz" * 32})


def test_report_serialises_without_secrets() -> None:
    report = VerificationReport(
        outcome=Outcome.ADDRESS_SIGNATURE_INVALID, stage=Stage.ADDRESS_SIGNATURE
    )
    payload = json.loads(report.model_dump_json())
    assert payload == {
        "schema_version": CURRENT_REPORT_SCHEMA_VERSION,
        "outcome": "address_signature_invalid",
        "stage": "address_signature",
    }
    assert not report.ok


def test_report_ok_only_on_success() -> None:
    assert VerificationReport(outcome=Outcome.SUCCESS, stage=Stage.COMPLETE).ok
    for outcome in Outcome:
        if outcome is not Outcome.SUCCESS:
            assert not VerificationReport(outcome=outcome, stage=Stage.INPUT).ok
