"""Domain Types — rich types and constants shared across the engine.

Invariants:
    - NULL_STATE_NAME (None) is reserved for the null state of each automaton
    - A Symbol is a single-character string
    - Digit alphabets are prefixes of DIGITS (lowercase beyond 9)

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StateName = NewType("StateName", str)
Symbol = NewType("Symbol", str)

NULL_STATE_NAME: StateName | None = None


# ─── Digit Alphabets ─────────────────────────────────────────────

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

MIN_BASE = 2
MAX_BASE = len(DIGITS)  # 36
MIN_MODULO = 2
