"""Core Layer — pure automaton logic, no IO, no logging, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All failures are raised as AutomatonError subclasses (see errors.py)

Design Decisions:
    - Functional core separated from imperative shell: services and routes build
      automata here and decide how to report failures
"""
