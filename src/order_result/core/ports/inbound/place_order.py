from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from order_result.core.domain.model.inventory import ReservationRequest
from order_result.core.domain.model.order import Order
from order_result.core.domain.model.outcome import Outcome


@dataclass(frozen=True)
class PlaceOrderCommand:
    customer_id: str
    items: Tuple[ReservationRequest, ...]


class PlaceOrderUseCase(Protocol):
    def place_order(self, command: PlaceOrderCommand) -> Outcome[Order]: ...
