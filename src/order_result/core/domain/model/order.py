from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from order_result.core.domain.model.inventory import ReservationRequest


class OrderStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    FAILED = "Failed"


@dataclass(frozen=True)
class Order:
    order_id: int
    customer_id: str
    items: Tuple[ReservationRequest, ...]
    status: OrderStatus = OrderStatus.PENDING

    def confirm(self) -> "Order":
        return self._transition(OrderStatus.CONFIRMED)

    def fail(self) -> "Order":
        return self._transition(OrderStatus.FAILED)

    def _transition(self, target: OrderStatus) -> "Order":
        if self.status is not OrderStatus.PENDING:
            raise ValueError(
                f"illegal_transition: order {self.order_id} {self.status.value} -> {target.value}"
            )
        return replace(self, status=target)


@dataclass
class OrderIdSequence:
    """Monotonic order ids. Owned by whoever wires the order workflow."""

    start: int = 1
    _next: int = field(init=False, default=0)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self._next = self.start

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value
