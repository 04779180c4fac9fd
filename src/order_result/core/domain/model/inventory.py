from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationRequest:
    item_id: int
    quantity: int


@dataclass(frozen=True)
class InventoryRecord:
    item_id: int
    name: str
    quantity_available: int
    quantity_reserved: int

    @property
    def unreserved(self) -> int:
        return self.quantity_available - self.quantity_reserved
