"""Automaton — deterministic finite automaton over a fixed character alphabet.

Invariants:
    - Alphabet is sorted and deduplicated at construction, immutable afterwards
    - Registry always holds the null state under NULL_STATE_NAME; it can never be
      replaced, and its transition on every symbol is itself
    - Transition sources and the initial state must be current registry members
      (by identity, not by name)
    - Incorporating a same-named state retires the old one: its outgoing row is
      dropped; transitions still pointing at it go stale and are only rejected
      when the stale state is later used as a source
    - Unset transitions resolve to the null state (total transition function)
    - The null state is never final and carries no value, so its result is always None
    - run() validates the whole input before taking any step
    - Failed calls never modify the automaton

Design Decisions:
    - Registry (name -> State) separate from transition table (State -> row):
      table is keyed by identity so a retired state never aliases its replacement
    - Null state is never given a row: transition() short-circuits before the table
    - bisect over the sorted alphabet tuple for membership tests
    - Not thread-safe: an instance is confined to one owner
"""

from bisect import bisect_left
from typing import Generic, Iterable, TypeVar

from fsm_engine.core.domain_types import NULL_STATE_NAME, StateName, Symbol
from fsm_engine.core.errors import (
    ErrorContext,
    InvalidStateError,
    InvalidSymbolError,
    NotReadyError,
    NullReferenceError,
    NullStateViolationError,
)
from fsm_engine.core.state import NullState, State

E = TypeVar("E")


class Automaton(Generic[E]):
    """Deterministic finite automaton whose states carry values of type E."""

    def __init__(self, alphabet: Iterable[Symbol | str]):
        symbols = list(alphabet)
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidSymbolError(symbol)
        self._alphabet: tuple[Symbol, ...] = tuple(sorted(set(symbols)))

        self._null_state: State[E] = NullState()
        self._registry: dict[str | None, State[E]] = {
            NULL_STATE_NAME: self._null_state,
        }
        self._transitions: dict[State[E], dict[Symbol, State[E]]] = {}
        self._init_state: State[E] | None = None

    # ─── Queries ─────────────────────────────────────────────────

    @property
    def alphabet(self) -> tuple[Symbol, ...]:
        """The canonical sorted alphabet."""
        return self._alphabet

    @property
    def null_state(self) -> State[E]:
        return self._null_state

    @property
    def init_state(self) -> State[E] | None:
        return self._init_state

    @property
    def states(self) -> list[State[E]]:
        """All registered states, null state first."""
        return list(self._registry.values())

    @property
    def is_ready(self) -> bool:
        return self._init_state is not None

    def is_in_alphabet(self, symbol: object) -> bool:
        if not isinstance(symbol, str):
            return False
        index = bisect_left(self._alphabet, symbol)
        return index < len(self._alphabet) and self._alphabet[index] == symbol

    def is_string_of_alphabet(self, symbols: Iterable[Symbol | str]) -> bool:
        return all(self.is_in_alphabet(symbol) for symbol in symbols)

    def contains_state(self, state: object) -> bool:
        if not isinstance(state, State):
            return False
        return self._registry.get(state.name) is state

    def state_by_name(self, name: StateName | str | None) -> State[E] | None:
        """Registered state for name; None looks up the null state."""
        return self._registry.get(name)

    # ─── Registration ────────────────────────────────────────────

    def incorporate(self, state: State[E]) -> None:
        """Register state, retiring any state already holding its name."""
        if state is None:
            raise NullReferenceError("state")
        if not isinstance(state, State):
            raise InvalidStateError(repr(state))
        if state.name == NULL_STATE_NAME:
            raise NullStateViolationError(
                "The null state's name cannot be given to another state",
            )

        retired = self._registry.get(state.name)
        if retired is not None:
            self._transitions.pop(retired, None)

        self._registry[state.name] = state
        self._transitions[state] = {}

    def new_state(
        self,
        name: StateName | str,
        value: E | None = None,
        is_final: bool = False,
    ) -> State[E]:
        """Create a state and incorporate it in one call."""
        state: State[E] = State(name, is_final, value)
        self.incorporate(state)
        return state

    def new_final_state(self, name: StateName | str, value: E | None) -> State[E]:
        return self.new_state(name, value, is_final=True)

    # ─── Transitions ─────────────────────────────────────────────

    def transition(self, state: State[E], symbol: Symbol | str) -> State[E]:
        """Successor of state on symbol; the null state when unset."""
        self._require_member(state, "state")
        self._require_symbol(symbol)
        if state is self._null_state:
            return self._null_state
        return self._transitions[state].get(symbol, self._null_state)

    def set_transition(
        self, source: State[E], symbol: Symbol | str, target: State[E],
    ) -> None:
        """Map (source, symbol) to target, overwriting any earlier mapping."""
        self._require_member(source, "source")
        self._require_member(target, "target")
        self._require_symbol(symbol)
        if source is self._null_state:
            raise NullStateViolationError(
                "Transitions from the null state cannot be changed",
                ErrorContext(symbol=symbol),
            )
        self._transitions[source][symbol] = target

    def set_init_state(self, state: State[E]) -> None:
        self._require_member(state, "state")
        self._init_state = state

    # ─── Execution ───────────────────────────────────────────────

    def run(self, symbols: Iterable[Symbol | str]) -> State[E]:
        """Consume symbols from the initial state and return the final state.

        The whole input is validated before any transition is taken. Once the
        null state is reached the rest of the input is skipped.
        """
        symbols = self._validated_input(symbols)
        current = self._init_state
        for symbol in symbols:
            if current is self._null_state:
                return current
            current = self.transition(current, symbol)
        return current

    def trace(self, symbols: Iterable[Symbol | str]) -> list[State[E]]:
        """States visited by run(), starting with the initial state."""
        symbols = self._validated_input(symbols)
        current = self._init_state
        path = [current]
        for symbol in symbols:
            if current is self._null_state:
                break
            current = self.transition(current, symbol)
            path.append(current)
        return path

    # ─── Helpers ─────────────────────────────────────────────────

    def _validated_input(self, symbols: Iterable[Symbol | str]) -> list[Symbol]:
        if not self.is_ready:
            raise NotReadyError()
        symbols = list(symbols)
        for symbol in symbols:
            self._require_symbol(symbol)
        return symbols

    def _require_member(self, state: State[E] | None, argument: str) -> None:
        if state is None:
            raise NullReferenceError(argument)
        if not self.contains_state(state):
            name = state.name if isinstance(state, State) else repr(state)
            raise InvalidStateError(name)

    def _require_symbol(self, symbol: object) -> None:
        if not self.is_in_alphabet(symbol):
            raise InvalidSymbolError(symbol)

    def __repr__(self) -> str:
        return (
            f"Automaton(alphabet={''.join(self._alphabet)!r}, "
            f"states={len(self._registry)}, ready={self.is_ready})"
        )
