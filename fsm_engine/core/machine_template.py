"""Machine Template — declarative construction and checking of small automata.

Invariants:
    - build_machine returns None on any construction error (never a partial machine)
    - The first listed state becomes the initial state; an empty list yields None
    - check_cases compares run(input).result with the expected value (None = no result)
    - Run errors (invalid symbols) propagate from check_cases to the caller

Design Decisions:
    - Frozen dataclasses for transitions and cases: machines read as data tables
"""

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from fsm_engine.core.automaton import Automaton
from fsm_engine.core.errors import AutomatonError
from fsm_engine.core.state import State


@dataclass(frozen=True)
class TransitionSpec:
    source: State
    symbol: str
    target: State


@dataclass(frozen=True)
class MachineCase:
    input: str
    expected: Any = None


def build_machine(
    alphabet: Iterable[str],
    states: Sequence[State],
    transitions: Iterable[TransitionSpec],
) -> Automaton | None:
    """Incorporate states, wire transitions, start at states[0]."""
    if not states:
        return None
    try:
        machine: Automaton = Automaton(alphabet)
        for state in states:
            machine.incorporate(state)
        for wiring in transitions:
            machine.set_transition(wiring.source, wiring.symbol, wiring.target)
        machine.set_init_state(states[0])
    except AutomatonError:
        return None
    return machine


def check_cases(machine: Automaton, cases: Iterable[MachineCase]) -> list[MachineCase]:
    """Return the cases whose run result differs from the expected value."""
    return [
        case for case in cases
        if machine.run(case.input).result != case.expected
    ]
