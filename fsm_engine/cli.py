"""
FSM Engine Command Line Interface

Usage:
    python -m fsm_engine <command> [args]

Commands:
    verify      Check a modulo machine against n % modulo for 0..upper bound
    remainder   Run one digit string through a modulo machine

Examples:
    python -m fsm_engine verify --base 2 --modulo 3 --upper-bound 50
    python -m fsm_engine remainder --base 16 --modulo 7 ff3a

Exit codes:
    0  success (all cases passed / remainder printed)
    1  verification found failing cases
    2  machine construction refused or invalid input
"""

import argparse
import logging
import sys
from typing import List, Optional

from fsm_engine.config import get_settings
from fsm_engine.core.errors import AutomatonError, MachineConstructionError
from fsm_engine.infrastructure.observability import setup_logging
from fsm_engine.services.verify_modulo import evaluate_remainder, verify_modulo_machine

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED_CASES = 1
EXIT_REFUSED = 2


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="fsm_engine",
        description="Remainder automata: build, run and verify",
    )
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-format", default="text", choices=["text", "json"],
        help="Log output format (default: text)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    verify = subparsers.add_parser("verify", help="Verify a modulo machine")
    _add_machine_args(verify)
    verify.add_argument(
        "--upper-bound", type=non_negative_int, default=settings.default_upper_bound,
        help=f"Largest number checked (default: {settings.default_upper_bound})",
    )
    verify.add_argument(
        "--all", action="store_true", dest="report_all",
        help="Keep going after the first failing case",
    )

    remainder = subparsers.add_parser("remainder", help="Evaluate one digit string")
    _add_machine_args(remainder)
    remainder.add_argument("digits", help="Number written in the given base")

    return parser


def _add_machine_args(parser: argparse.ArgumentParser) -> None:
    settings = get_settings()
    parser.add_argument(
        "--base", type=int, default=settings.default_base,
        help=f"Numeral base, 2-36 (default: {settings.default_base})",
    )
    parser.add_argument(
        "--modulo", type=int, default=settings.default_modulo,
        help=f"Modulus, at least 2 (default: {settings.default_modulo})",
    )


def run_verify(args: argparse.Namespace) -> int:
    print(f"Testing modulo machine for base {args.base} and modulo {args.modulo}")
    print(f"Testing all numbers from 0 to {args.upper_bound}")
    try:
        report = verify_modulo_machine(
            args.base, args.modulo, args.upper_bound,
            stop_on_first_failure=not args.report_all,
        )
    except MachineConstructionError as e:
        logger.warning("Refused configuration", extra={"base": args.base, "modulo": args.modulo})
        print(f"Machine construction refused: {e.message}", file=sys.stderr)
        return EXIT_REFUSED

    for case in report.failed_cases:
        print(f"\t- Case {case.number} ({case.digits!r}) output {case.actual}")
    print(f"Checked {report.checked} cases, {len(report.failed_cases)} failed.")
    return EXIT_OK if report.passed else EXIT_FAILED_CASES


def run_remainder(args: argparse.Namespace) -> int:
    digits = args.digits.strip().lower()
    try:
        result, path = evaluate_remainder(args.base, args.modulo, digits)
    except AutomatonError as e:
        logger.warning("%s: %s", e.code, e.message, extra={"error_code": e.code})
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_REFUSED

    trail = " -> ".join(str(state.name) for state in path)
    print(trail)
    print(result if result is not None else "no result")
    return EXIT_OK


COMMANDS = {
    "verify": run_verify,
    "remainder": run_remainder,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_format)
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
