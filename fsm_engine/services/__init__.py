"""Services Layer — orchestration around the pure core, with logging.

Invariants:
    - Services build automata through core/ factories only
    - AutomatonError subclasses propagate to the caller (routes, CLI)
"""
