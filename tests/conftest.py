from __future__ import annotations

import pytest

from order_result.adapters.outbound.in_memory_inventory import InMemoryInventoryStore
from order_result.core.domain.model.inventory import InventoryRecord
from order_result.core.domain.model.order import OrderIdSequence
from order_result.core.domain.service.place_order_service import (
    PlaceOrderDeps,
    PlaceOrderService,
)
from order_result.core.domain.service.reservation_service import (
    ReservationDeps,
    ReservationService,
)


@pytest.fixture
def store() -> InMemoryInventoryStore:
    return InMemoryInventoryStore.seeded(
        [
            InventoryRecord(1, "Widget", quantity_available=100, quantity_reserved=5),
            InventoryRecord(2, "Gadget", quantity_available=10, quantity_reserved=0),
            InventoryRecord(3, "Gizmo", quantity_available=50, quantity_reserved=20),
        ]
    )


@pytest.fixture
def reservations(store: InMemoryInventoryStore) -> ReservationService:
    return ReservationService(ReservationDeps(store=store))


@pytest.fixture
def place_order(reservations: ReservationService) -> PlaceOrderService:
    return PlaceOrderService(
        PlaceOrderDeps(reservations=reservations, order_ids=OrderIdSequence(start=1))
    )


def reserved_of(store: InMemoryInventoryStore, item_id: int) -> int:
    return store.records[item_id].quantity_reserved
