"""Modulo Verification — tests for the sweep service.

Tests cover:
    - Valid machines pass every case and count them
    - Refused configurations raise MachineConstructionError
    - Failures are collected (and stop early by default)
    - evaluate_remainder returns the result and visited path
    - Start/finish are logged with base/modulo extras
"""

import logging

import pytest

from fsm_engine.core.errors import InvalidSymbolError, MachineConstructionError
from fsm_engine.services import verify_modulo
from fsm_engine.services.verify_modulo import (
    evaluate_remainder,
    verify_modulo_machine,
)


def test_binary_mod_three_passes_up_to_fifty():
    report = verify_modulo_machine(2, 3, 50)
    assert report.passed
    assert report.checked == 51
    assert report.failed_cases == []


def test_larger_sweep_passes():
    report = verify_modulo_machine(36, 49, 2 * 36 * 36)
    assert report.passed
    assert report.checked == 2 * 36 * 36 + 1


def test_upper_bound_zero_checks_one_case():
    report = verify_modulo_machine(10, 4, 0)
    assert report.checked == 1
    assert report.passed


@pytest.mark.parametrize("base, modulo", [(1, 3), (37, 3), (2, 1)])
def test_refused_configuration_raises(base, modulo):
    with pytest.raises(MachineConstructionError) as exc_info:
        verify_modulo_machine(base, modulo, 10)
    assert exc_info.value.http_status == 422


def _sabotage_s1(monkeypatch):
    """Make S1 report value 99 so cases landing there fail."""
    real_factory = verify_modulo.make_modulo_machine

    def broken_factory(base, modulo):
        machine = real_factory(base, modulo)
        machine.state_by_name("S1").value = 99
        return machine

    monkeypatch.setattr(verify_modulo, "make_modulo_machine", broken_factory)


def test_failures_stop_at_first_by_default(monkeypatch):
    _sabotage_s1(monkeypatch)
    report = verify_modulo_machine(2, 3, 50)
    assert not report.passed
    assert report.checked == 2
    assert len(report.failed_cases) == 1
    failed = report.failed_cases[0]
    assert (failed.number, failed.digits, failed.expected, failed.actual) == (1, "1", 1, 99)


def test_failures_collected_when_not_stopping(monkeypatch):
    _sabotage_s1(monkeypatch)
    report = verify_modulo_machine(2, 3, 50, stop_on_first_failure=False)
    assert report.checked == 51
    assert [case.number for case in report.failed_cases] == [
        n for n in range(51) if n % 3 == 1
    ]


def test_evaluate_remainder_returns_result_and_path():
    result, path = evaluate_remainder(2, 3, "1101")
    assert result == 1
    assert [state.name for state in path] == ["S0", "S1", "S0", "S0", "S1"]


def test_evaluate_remainder_empty_digits():
    result, path = evaluate_remainder(2, 3, "")
    assert result == 0
    assert [state.name for state in path] == ["S0"]


def test_evaluate_remainder_rejects_foreign_digits():
    with pytest.raises(InvalidSymbolError):
        evaluate_remainder(2, 3, "102")


def test_verification_logs_start_and_finish(caplog):
    with caplog.at_level(logging.INFO, logger="fsm_engine.services.verify_modulo"):
        verify_modulo_machine(3, 5, 10)
    messages = [record.getMessage() for record in caplog.records]
    assert "Verifying modulo machine" in messages
    assert "Verification finished" in messages
    finished = caplog.records[-1]
    assert finished.checked == 11
    assert finished.failed == 0
