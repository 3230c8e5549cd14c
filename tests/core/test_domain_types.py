"""Domain Types — verifies identity types and digit constants."""

from fsm_engine.core.automaton import Automaton
from fsm_engine.core.domain_types import (
    DIGITS, MAX_BASE, MIN_BASE, MIN_MODULO, NULL_STATE_NAME, StateName, Symbol,
)


def test_identity_types_wrap_str():
    assert StateName("S0") == "S0"
    assert Symbol("1") == "1"


def test_null_state_name_is_none():
    assert NULL_STATE_NAME is None


def test_digit_alphabet_bounds():
    assert MIN_BASE == 2
    assert MAX_BASE == 36
    assert MIN_MODULO == 2
    assert DIGITS[:10] == "0123456789"
    assert DIGITS[-1] == "z"
    assert len(set(DIGITS)) == MAX_BASE


def test_symbols_build_an_alphabet():
    machine: Automaton[int] = Automaton([Symbol("b"), Symbol("a")])
    assert machine.alphabet == ("a", "b")
    assert machine.is_in_alphabet(Symbol("a"))
