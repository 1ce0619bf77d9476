"""Application service: Edit Order use case (full replace).

The backend only knows a full PUT, so unchanged fields are filled in from
the order as it currently stands before the replacement is sent.
Statuses, testimonial link and creation time are carried over untouched.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from sweetorya.application.create_order import build_order
from sweetorya.application.dto import OrderDTO, OrderForm, OrderItemSpec, order_to_dto
from sweetorya.domain.model.order import Order
from sweetorya.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def form_of(order: Order) -> OrderForm:
    return OrderForm(
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        recipient_name=order.recipient_name,
        recipient_phone=order.recipient_phone,
        address=order.address,
        delivery_date=order.delivery_date,
        delivery_time=order.delivery_time,
        note=order.note,
        card_to=order.card.to,
        card_message=order.card.message,
        card_from=order.card.sender,
    )


def item_specs_of(order: Order) -> list[OrderItemSpec]:
    return [
        OrderItemSpec(
            variant_name=item.variant_name,
            quantity=str(item.quantity.value),
            unit_price=str(item.unit_price.amount),
        )
        for item in order.items
    ]


class EditOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: str,
        item_specs: list[OrderItemSpec] | None = None,
        **changes: Any,
    ) -> OrderDTO:
        """Replace an order.

        *changes* are ``OrderForm`` field names; ``None`` values are ignored.
        Passing *item_specs* replaces the whole cart.
        """
        current = self._order_repo.get_by_id(order_id)

        form = dataclasses.replace(
            form_of(current), **{k: v for k, v in changes.items() if v is not None}
        )
        order = build_order(form, item_specs if item_specs else item_specs_of(current))
        order.id = current.id
        order.status = current.status
        order.payment_status = current.payment_status
        order.testimonial_url = current.testimonial_url
        order.created_at = current.created_at

        updated = self._order_repo.replace(order_id, order)
        logger.info("Replaced order %s", order_id)
        return order_to_dto(updated)
