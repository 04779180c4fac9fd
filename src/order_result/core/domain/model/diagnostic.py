from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


class ErrorCodes:
    DB_TIMEOUT = "DB_TIMEOUT"
    DB_CONNECTION = "DB_CONNECTION"
    DB_DEADLOCK = "DB_DEADLOCK"
    DB_ERROR = "DB_ERROR"

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    UPDATE_FAILED = "UPDATE_FAILED"

    INSUFFICIENT_INVENTORY = "INSUFFICIENT_INVENTORY"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    RESERVATION_FAILED = "RESERVATION_FAILED"

    ORDER_FAILED = "ORDER_FAILED"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    UNKNOWN = "UNKNOWN"


INFRASTRUCTURE_CODES = frozenset(
    {
        ErrorCodes.DB_TIMEOUT,
        ErrorCodes.DB_CONNECTION,
        ErrorCodes.DB_DEADLOCK,
        ErrorCodes.DB_ERROR,
    }
)


@dataclass(frozen=True)
class Diagnostic:
    """Structured failure travelling upward inside a Failure.

    A diagnostic belongs to the call chain that created it until it is
    returned, so ``with_context`` writes into ``context`` directly.
    ``wrap`` never mutates: it builds a new diagnostic owning this one.
    """

    message: str
    code: str = ErrorCodes.UNKNOWN
    context: dict[str, Any] = field(default_factory=dict)
    cause: Diagnostic | None = None

    def with_context(self, key: str, value: Any) -> Diagnostic:
        self.context[key] = value
        return self

    def wrap(self, message: str, code: str) -> Diagnostic:
        return Diagnostic(message=message, code=code, cause=self)

    def causes(self) -> Iterator[Diagnostic]:
        current: Diagnostic | None = self
        while current is not None:
            yield current
            current = current.cause

    def root_cause(self) -> Diagnostic:
        *_, last = self.causes()
        return last

    def find(self, code: str) -> Diagnostic | None:
        return next((d for d in self.causes() if d.code == code), None)

    def __str__(self) -> str:
        ctx = ""
        if self.context:
            pairs = ", ".join(f"{k}={v}" for k, v in self.context.items())
            ctx = f" {{{pairs}}}"
        inner = f" -> {self.cause}" if self.cause is not None else ""
        return f"[{self.code}] {self.message}{ctx}{inner}"
