"""Modulo Verification — sweeps a remainder machine against integer arithmetic.

Invariants:
    - Every n in [0, upper_bound] is rendered in the machine's base and run
    - A case fails when the final state's result differs from n % modulo
    - Refused configurations raise MachineConstructionError (nothing is checked)
    - Invalid digit strings propagate InvalidSymbolError from the automaton

Design Decisions:
    - Imperative shell around core.modulo_machine: logging lives here, not in core/
    - stop_on_first_failure mirrors the classic demo; the API can ask for all failures
"""

import logging
from dataclasses import dataclass, field

from fsm_engine.core.automaton import Automaton
from fsm_engine.core.errors import ErrorContext, MachineConstructionError
from fsm_engine.core.modulo_machine import make_modulo_machine, to_base_string
from fsm_engine.core.state import State

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FailedCase:
    number: int
    digits: str
    expected: int
    actual: int | None


@dataclass
class VerificationReport:
    base: int
    modulo: int
    upper_bound: int
    checked: int = 0
    failed_cases: list[FailedCase] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failed_cases


def build_modulo_machine(base: int, modulo: int) -> Automaton[int]:
    """make_modulo_machine, but refusal becomes MachineConstructionError."""
    machine = make_modulo_machine(base, modulo)
    if machine is None:
        raise MachineConstructionError(
            f"Cannot build a modulo machine for base={base}, modulo={modulo}",
            ErrorContext(debug_info={"base": base, "modulo": modulo}),
        )
    return machine


def verify_modulo_machine(
    base: int,
    modulo: int,
    upper_bound: int,
    stop_on_first_failure: bool = True,
) -> VerificationReport:
    """Check machine(base, modulo) against n % modulo for 0 <= n <= upper_bound."""
    machine = build_modulo_machine(base, modulo)
    report = VerificationReport(base=base, modulo=modulo, upper_bound=upper_bound)
    logger.info(
        "Verifying modulo machine",
        extra={"base": base, "modulo": modulo, "upper_bound": upper_bound},
    )

    for number in range(upper_bound + 1):
        digits = to_base_string(number, base)
        expected = number % modulo
        actual = machine.run(digits).result
        report.checked += 1
        if actual != expected:
            report.failed_cases.append(FailedCase(number, digits, expected, actual))
            logger.warning(
                "Case %d (%r) produced %r, expected %d",
                number, digits, actual, expected,
                extra={"base": base, "modulo": modulo, "number": number},
            )
            if stop_on_first_failure:
                break

    logger.info(
        "Verification finished",
        extra={
            "base": base, "modulo": modulo,
            "checked": report.checked, "failed": len(report.failed_cases),
        },
    )
    return report


def evaluate_remainder(
    base: int, modulo: int, digits: str,
) -> tuple[int | None, list[State[int]]]:
    """Run digits through machine(base, modulo). Returns (result, visited states)."""
    machine = build_modulo_machine(base, modulo)
    path = machine.trace(digits)
    return path[-1].result, path
