"""Modulo Machine — automaton computing the remainder of a base-B number mod M.

Invariants:
    - base in [MIN_BASE, MAX_BASE], modulo >= MIN_MODULO, else None (no partial machine)
    - Alphabet is DIGITS[:base]; one final state S{i} with value i per remainder
    - S_m --d--> S_{(m * base + d) % modulo}; S0 is initial
    - Leading zeros do not change the remainder; "" evaluates to S0 (remainder 0)

Design Decisions:
    - Appending digit d to a number n yields n * base + d, so the remainder of
      the longer prefix depends only on the remainder of the shorter one
    - Refusal returns None rather than raising: callers decide how to report it
"""

from fsm_engine.core.automaton import Automaton
from fsm_engine.core.domain_types import DIGITS, MAX_BASE, MIN_BASE, MIN_MODULO
from fsm_engine.core.errors import AutomatonError
from fsm_engine.core.state import State


def state_name_for(remainder: int) -> str:
    return f"S{remainder}"


def is_valid_configuration(base: int, modulo: int) -> bool:
    return MIN_BASE <= base <= MAX_BASE and modulo >= MIN_MODULO


def make_modulo_machine(base: int, modulo: int) -> Automaton[int] | None:
    """Build the remainder machine, or None if (base, modulo) is out of range."""
    if not is_valid_configuration(base, modulo):
        return None

    machine: Automaton[int] = Automaton(DIGITS[:base])
    remainders: list[State[int]] = [
        machine.new_final_state(state_name_for(i), i) for i in range(modulo)
    ]

    try:
        for remainder, state in enumerate(remainders):
            for digit in range(base):
                machine.set_transition(
                    state, DIGITS[digit],
                    remainders[(remainder * base + digit) % modulo],
                )
        machine.set_init_state(remainders[0])
    except AutomatonError:
        return None
    return machine


def to_base_string(number: int, base: int) -> str:
    """Render a non-negative integer in base with lowercase digits."""
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    if number == 0:
        return DIGITS[0]

    digits = []
    while number:
        number, digit = divmod(number, base)
        digits.append(DIGITS[digit])
    return "".join(reversed(digits))
