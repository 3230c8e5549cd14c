"""Modulo Schemas — Pydantic models for the remainder machine endpoints.

Invariants:
    - base: MIN_BASE..MAX_BASE; modulo >= MIN_MODULO
    - digits: stripped and lower-cased; alphabet membership is checked by the automaton
    - modulo: at most settings.max_modulo (machine size grows with base * modulo)
    - upper_bound: 0..settings.max_upper_bound

Design Decisions:
    - Range checks here give field-level 400s; the factory still refuses on its own
"""

from pydantic import BaseModel, Field, field_validator

from fsm_engine.config import get_settings
from fsm_engine.core.domain_types import MAX_BASE, MIN_BASE, MIN_MODULO


def _cap_modulo(v: int) -> int:
    cap = get_settings().max_modulo
    if v > cap:
        raise ValueError(f"modulo must be at most {cap}")
    return v


class RemainderRequest(BaseModel):
    """Evaluate one digit string."""
    base: int = Field(ge=MIN_BASE, le=MAX_BASE)
    modulo: int = Field(ge=MIN_MODULO)
    digits: str = Field(max_length=10_000)

    @field_validator("modulo")
    @classmethod
    def cap_modulo(cls, v: int) -> int:
        return _cap_modulo(v)

    @field_validator("digits")
    @classmethod
    def normalize_digits(cls, v: str) -> str:
        return v.strip().lower()


class RemainderResponse(BaseModel):
    base: int
    modulo: int
    digits: str
    remainder: int | None
    final_state: str | None
    path: list[str | None]


class VerifyRequest(BaseModel):
    """Sweep 0..upper_bound through the machine."""
    base: int = Field(ge=MIN_BASE, le=MAX_BASE)
    modulo: int = Field(ge=MIN_MODULO)
    upper_bound: int = Field(ge=0)
    stop_on_first_failure: bool = False

    @field_validator("modulo")
    @classmethod
    def cap_modulo(cls, v: int) -> int:
        return _cap_modulo(v)

    @field_validator("upper_bound")
    @classmethod
    def cap_upper_bound(cls, v: int) -> int:
        cap = get_settings().max_upper_bound
        if v > cap:
            raise ValueError(f"upper_bound must be at most {cap}")
        return v


class FailedCaseOut(BaseModel):
    number: int
    digits: str
    expected: int
    actual: int | None


class VerifyResponse(BaseModel):
    base: int
    modulo: int
    upper_bound: int
    checked: int
    passed: bool
    failed_cases: list[FailedCaseOut]
