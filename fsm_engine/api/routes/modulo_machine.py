"""Modulo Machine Routes — evaluate and verify remainder automata over HTTP.

Invariants:
    - POST /api/v1/modulo/remainder → remainder of one digit string
    - POST /api/v1/modulo/verify → sweep report for 0..upper_bound
    - A fresh automaton is built per request (instances are never shared)
    - AutomatonError propagates to the global handler (400/409/422 envelope)

Design Decisions:
    - Sync handlers: the sweep is CPU-bound, FastAPI runs it in the threadpool
"""

import logging
from fastapi import APIRouter

from fsm_engine.schemas.modulo import (
    FailedCaseOut,
    RemainderRequest,
    RemainderResponse,
    VerifyRequest,
    VerifyResponse,
)
from fsm_engine.services.verify_modulo import evaluate_remainder, verify_modulo_machine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/modulo", tags=["modulo"])


@router.post("/remainder", response_model=RemainderResponse)
def remainder(body: RemainderRequest):
    logger.info(
        "Evaluating %d digit(s)", len(body.digits),
        extra={"base": body.base, "modulo": body.modulo},
    )
    result, path = evaluate_remainder(body.base, body.modulo, body.digits)
    return RemainderResponse(
        base=body.base,
        modulo=body.modulo,
        digits=body.digits,
        remainder=result,
        final_state=path[-1].name,
        path=[state.name for state in path],
    )


@router.post("/verify", response_model=VerifyResponse)
def verify(body: VerifyRequest):
    report = verify_modulo_machine(
        body.base, body.modulo, body.upper_bound,
        stop_on_first_failure=body.stop_on_first_failure,
    )
    if not report.passed:
        logger.warning(
            "Modulo machine failed %d case(s)", len(report.failed_cases),
            extra={"base": body.base, "modulo": body.modulo, "checked": report.checked},
        )
    return VerifyResponse(
        base=report.base,
        modulo=report.modulo,
        upper_bound=report.upper_bound,
        checked=report.checked,
        passed=report.passed,
        failed_cases=[
            FailedCaseOut(
                number=case.number, digits=case.digits,
                expected=case.expected, actual=case.actual,
            )
            for case in report.failed_cases
        ],
    )
