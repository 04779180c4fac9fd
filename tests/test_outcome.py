from __future__ import annotations

from returns.result import Failure, Success

from order_result.core.domain.model.diagnostic import Diagnostic, ErrorCodes
from order_result.core.domain.model.outcome import (
    bind_outcome,
    enrich,
    failure,
    is_success,
    map_outcome,
    match_outcome,
    success,
    wrap_failure,
)


def test_constructors_build_both_variants():
    diag = Diagnostic("boom", "X")
    assert isinstance(success(1), Success)
    assert isinstance(failure(diag), Failure)
    assert is_success(success(None))
    assert not is_success(failure(diag))


def test_map_applies_only_on_success():
    assert map_outcome(success(2), lambda x: x * 10) == Success(20)


def test_map_passes_same_diagnostic_through():
    diag = Diagnostic("boom", "X")
    calls = []
    result = map_outcome(failure(diag), lambda x: calls.append(x))
    assert calls == []
    assert result.failure() is diag


def test_bind_chains_on_success():
    assert bind_outcome(success(2), lambda x: success(x + 1)) == Success(3)
    diag = Diagnostic("late", "Y")
    assert bind_outcome(success(2), lambda _: failure(diag)).failure() is diag


def test_bind_short_circuits_on_failure():
    diag = Diagnostic("boom", "X")
    calls = 0

    def step(value):
        nonlocal calls
        calls += 1
        return success(value)

    result = bind_outcome(bind_outcome(failure(diag), step), step)
    assert calls == 0
    assert result.failure() is diag


def test_match_runs_exactly_one_branch():
    diag = Diagnostic("boom", "X")
    assert match_outcome(success(5), lambda v: f"ok:{v}", lambda d: d.code) == "ok:5"
    assert match_outcome(failure(diag), lambda v: f"ok:{v}", lambda d: d.code) == "X"


def test_enrich_and_wrap_leave_success_alone():
    ok = success(1)
    assert enrich(ok, "k", "v") == Success(1)
    assert wrap_failure(ok, "outer", "OUTER") == Success(1)


def test_enrich_and_wrap_failure():
    diag = Diagnostic("inner", ErrorCodes.DB_TIMEOUT)
    wrapped = wrap_failure(enrich(failure(diag), "itemId", 7), "outer", "OUTER")
    outer = wrapped.failure()
    assert outer.code == "OUTER"
    assert outer.cause is diag
    assert diag.context == {"itemId": 7}
