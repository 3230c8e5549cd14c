"""State — one node of an automaton: immutable name, mutable finality and value.

Invariants:
    - name is fixed at construction (read-only property)
    - result == value when final, otherwise None
    - Setting result forces finality to True
    - No validation here: name legality is enforced by Automaton.incorporate
    - NullState refuses finality, value and result changes

Design Decisions:
    - Identity equality (no __eq__ override): two states with equal name and value
      are still different registry members
    - Generic[E]: the output payload type is chosen by the caller
"""

from typing import Generic, TypeVar

from fsm_engine.core.domain_types import NULL_STATE_NAME, StateName
from fsm_engine.core.errors import NullStateViolationError

E = TypeVar("E")


class State(Generic[E]):
    """A named automaton node carrying an optional output value."""

    __slots__ = ("_name", "_is_final", "_value")

    def __init__(
        self,
        name: StateName | str | None,
        is_final: bool = False,
        value: E | None = None,
    ):
        self._name = name
        self._is_final = is_final
        self._value = value

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_final(self) -> bool:
        return self._is_final

    @is_final.setter
    def is_final(self, finality: bool) -> None:
        self._is_final = finality

    @property
    def value(self) -> E | None:
        return self._value

    @value.setter
    def value(self, new_value: E | None) -> None:
        self._value = new_value

    @property
    def result(self) -> E | None:
        """Value of the state if it is final, otherwise None."""
        return self._value if self._is_final else None

    @result.setter
    def result(self, new_result: E | None) -> None:
        self.set_result(new_result)

    def set_result(self, new_result: E | None) -> None:
        """Make the state final and give it a new value."""
        self._is_final = True
        self._value = new_result

    def __repr__(self) -> str:
        return (
            f"State(name={self._name!r}, is_final={self._is_final}, "
            f"value={self._value!r})"
        )


class NullState(State):
    """The dead state of an automaton: unnamed, never final, valueless."""

    __slots__ = ()

    def __init__(self):
        super().__init__(NULL_STATE_NAME)

    @State.is_final.setter
    def is_final(self, finality: bool) -> None:
        raise NullStateViolationError("The null state cannot be made final")

    @State.value.setter
    def value(self, new_value) -> None:
        raise NullStateViolationError("The null state cannot carry a value")

    def set_result(self, new_result) -> None:
        raise NullStateViolationError("The null state cannot carry a result")

    def __repr__(self) -> str:
        return "NullState()"
