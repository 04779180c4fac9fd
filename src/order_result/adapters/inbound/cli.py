from __future__ import annotations

import logging

from pydantic import BaseModel, ValidationError

from order_result.adapters.inbound.controller import OrderController
from order_result.core.domain.model.inventory import ReservationRequest

logger = logging.getLogger("order_result.cli")


class PlaceOrderItemIn(BaseModel):
    item_id: int
    quantity: int


class PlaceOrderRequest(BaseModel):
    # emptiness is checked by the order workflow, not here
    customer_id: str = ""
    items: list[PlaceOrderItemIn] = []


def run_cli(controller: OrderController, raw: str) -> int:
    """
    raw: JSON string.
    Example:
      {"customer_id":"c-1","items":[{"item_id":1,"quantity":10}]}
    """
    try:
        req = PlaceOrderRequest.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("rejected cli payload: %s", e.errors())
        print(f"invalid_input: {e}")
        return 2

    response = controller.handle_place_order(
        req.customer_id,
        [ReservationRequest(item_id=x.item_id, quantity=x.quantity) for x in req.items],
    )
    print(response.model_dump_json())
    return 0 if response.success else 1
