from __future__ import annotations

from dataclasses import dataclass

from order_result import config
from order_result.adapters.inbound.controller import OrderController
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

SEED_INVENTORY = (
    InventoryRecord(item_id=1, name="Widget", quantity_available=100, quantity_reserved=5),
    InventoryRecord(item_id=2, name="Gadget", quantity_available=10, quantity_reserved=0),
    InventoryRecord(item_id=3, name="Gizmo", quantity_available=0, quantity_reserved=0),
)


@dataclass(frozen=True)
class UseCases:
    reservations: ReservationService
    place_order: PlaceOrderService


def build_usecases(
    store: InMemoryInventoryStore | None = None,
    order_ids: OrderIdSequence | None = None,
) -> UseCases:
    store = store or InMemoryInventoryStore.seeded(SEED_INVENTORY)
    order_ids = order_ids or OrderIdSequence(start=config.FIRST_ORDER_ID)

    reservations = ReservationService(ReservationDeps(store=store))
    place_order = PlaceOrderService(
        PlaceOrderDeps(reservations=reservations, order_ids=order_ids)
    )
    return UseCases(reservations=reservations, place_order=place_order)


def build_controller() -> OrderController:
    return OrderController(build_usecases().place_order)
