"""FSM Engine — deterministic finite automata with a null (dead) state.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Explicit imports only: from fsm_engine.core.automaton import Automaton
"""

__version__ = "1.0.0"
