"""Success/failure values for every fallible operation.

``Outcome[T]`` is a ``returns`` Result whose failure side is always a
:class:`Diagnostic`. Nothing here logs or retries; a failed step simply
short-circuits the rest of the chain.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from returns.result import Failure, Result, Success

from order_result.core.domain.model.diagnostic import Diagnostic

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

Outcome = Result[T, Diagnostic]


def success(value: T) -> Outcome[T]:
    return Success(value)


def failure(diagnostic: Diagnostic) -> Outcome[T]:
    return Failure(diagnostic)


def is_success(outcome: Outcome[T]) -> bool:
    return isinstance(outcome, Success)


def map_outcome(outcome: Outcome[T], function: Callable[[T], U]) -> Outcome[U]:
    # Failure.map returns the same container, diagnostic untouched
    return outcome.map(function)


def bind_outcome(
    outcome: Outcome[T], function: Callable[[T], Outcome[U]]
) -> Outcome[U]:
    return outcome.bind(function)


def match_outcome(
    outcome: Outcome[T],
    on_ok: Callable[[T], R],
    on_err: Callable[[Diagnostic], R],
) -> R:
    """Extract a value at a process boundary; both branches are mandatory."""
    if isinstance(outcome, Success):
        return on_ok(outcome.unwrap())
    return on_err(outcome.failure())


def enrich(outcome: Outcome[T], key: str, value: object) -> Outcome[T]:
    return outcome.alt(lambda diag: diag.with_context(key, value))


def wrap_failure(outcome: Outcome[T], message: str, code: str) -> Outcome[T]:
    return outcome.alt(lambda diag: diag.wrap(message, code))
