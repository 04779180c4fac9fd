from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from order_result.core.domain.model.inventory import ReservationRequest
from order_result.core.domain.model.outcome import Outcome


class ReserveItemsUseCase(Protocol):
    def reserve_items(
        self, requests: Sequence[ReservationRequest]
    ) -> Outcome[Tuple[int, ...]]: ...

    def release_reservation(self, item_id: int, quantity: int) -> Outcome[None]: ...
