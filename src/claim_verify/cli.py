"""Command-line shell for claim verification."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from .errors import MissingArgumentsError
from .logging_pipeline import StructuredLogging, configure_structured_logging
from .outcome import Outcome, Stage
from .schemas import Claim, VerificationReport
from .settings import ClaimVerifySettings, get_settings
from .verifier import ClaimVerifier

PROG = "claim-verify"
PACKAGE_LOGGER = logging.getLogger("claim_verify")
LOGGER = logging.getLogger(__name__)

MESSAGES: dict[Outcome, str] = {
    Outcome.SUCCESS: (
        "OK: Ethereum address signature and declaration signature are both valid"
    ),
    Outcome.INVALID_INPUT: "ERROR: some inputs are NOT CORRECT",
    Outcome.ADDRESS_SIGNATURE_INVALID: "ERROR: Ethereum address signature is INVALID",
    Outcome.DECLARATION_SIGNATURE_INVALID: "ERROR: Declaration signature is INVALID",
    Outcome.INTERNAL_ERROR: "ERROR: verification could not be completed",
}

USAGE_MESSAGE = (
    f"USAGE: {PROG} <TZL_pk> <ETH_addr> <ETH_addrSignature> <declarationSignature>"
)

_ARGUMENT_COUNT = 4
_QUIET_FLAGS = frozenset({"-q", "--quiet"})


class _UsageError(Exception):
    """Raised instead of letting argparse print to stderr and exit."""


class _ClaimArgumentParser(argparse.ArgumentParser):
    """Argument parser whose errors never echo the offending arguments."""

    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def _build_parser() -> _ClaimArgumentParser:
    parser = _ClaimArgumentParser(
        prog=PROG,
        description=(
            "Verify that an Ed25519 key signed an Ethereum address and the "
            "contributor declaration."
        ),
    )
    parser.add_argument(
        "fields",
        nargs="*",
        metavar="FIELD",
        help="TZL_pk ETH_addr ETH_addrSignature declarationSignature (hex, 0x optional).",
    )
    parser.add_argument(
        "--input",
        "-i",
        help="Path to a JSON claim object instead of positional fields.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the verification report as JSON instead of a status line.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Quiet mode: suppress output, just return exit code.",
    )
    return parser


def _claim_from_fields(fields: list[str]) -> Claim:
    """Build a claim from exactly four positional fields."""
    if len(fields) != _ARGUMENT_COUNT:
        raise MissingArgumentsError(len(fields), _ARGUMENT_COUNT)
    tzl_public_key, eth_address, address_signature, declaration_signature = fields
    return Claim(
        tzl_public_key=tzl_public_key,
        eth_address=eth_address,
        address_signature=address_signature,
        declaration_signature=declaration_signature,
    )


def _claim_from_file(path: str) -> Claim:
    """Load a claim from a JSON file."""
    text = Path(path).read_text(encoding="utf-8")
    return Claim.model_validate_json(text)


def _configure_logging(settings: ClaimVerifySettings) -> StructuredLogging | None:
    if settings.log_json:
        return configure_structured_logging(
            PACKAGE_LOGGER, trace_id=settings.trace_id, level=settings.log_level
        )
    PACKAGE_LOGGER.setLevel(settings.log_level)
    return None


def _emit(report: VerificationReport, *, as_json: bool, quiet: bool) -> None:
    if quiet:
        return
    if as_json:
        print(report.model_dump_json())
    else:
        print(MESSAGES[report.outcome])


def main(argv: list[str] | None = None) -> int:
    """Verify a claim and print one status line."""
    parser = _build_parser()

    raw_args = sys.argv[1:] if argv is None else argv

    try:
        args = parser.parse_args(raw_args)
    except _UsageError:
        # Fields starting with "-" are taken for options; never echo them.
        if _QUIET_FLAGS.isdisjoint(raw_args):
            print(USAGE_MESSAGE)
        return 1
    except SystemExit as exc:  # --help
        exit_code = int(exc.code) if isinstance(exc.code, int) else 1
        return 0 if exit_code == 0 else 1

    pipeline = _configure_logging(get_settings())
    try:
        try:
            if args.input:
                if args.fields:
                    raise MissingArgumentsError(len(args.fields), 0)
                claim = _claim_from_file(args.input)
            else:
                claim = _claim_from_fields(args.fields)
        except MissingArgumentsError:
            if not args.quiet:
                print(USAGE_MESSAGE)
            return 1
        except (OSError, ValidationError) as exc:
            LOGGER.warning(
                "Unable to load claim", extra={"error_type": type(exc).__name__}
            )
            _emit(
                VerificationReport(outcome=Outcome.INVALID_INPUT, stage=Stage.INPUT),
                as_json=args.json,
                quiet=args.quiet,
            )
            return 1

        report = ClaimVerifier().run(claim)
        _emit(report, as_json=args.json, quiet=args.quiet)
        return 0 if report.ok else 1
    finally:
        if pipeline is not None:
            pipeline.close()


if __name__ == "__main__":
    raise SystemExit(main())
