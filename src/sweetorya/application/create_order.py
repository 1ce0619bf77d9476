"""Application service: Create Order use case.

Builds the cart from the typed item lines, lets the Order aggregate run
its presence checks, and submits.  The order returned by the backend is
authoritative, including its total.
"""

from __future__ import annotations

import logging

from sweetorya.application.dto import OrderDTO, OrderForm, OrderItemSpec, order_to_dto
from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.cart import Cart
from sweetorya.domain.model.order import GreetingCard, Order
from sweetorya.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def build_order(form: OrderForm, item_specs: list[OrderItemSpec]) -> Order:
    """Turn form input into a validated Order.  No network call is made."""
    cart = Cart()
    for spec in item_specs:
        cart.add_item(spec.variant_name, spec.quantity, spec.unit_price)

    if cart.is_empty:
        raise ValidationError("Add at least one item to the order")

    return Order.create(
        customer_name=form.customer_name,
        customer_phone=form.customer_phone,
        recipient_name=form.recipient_name,
        recipient_phone=form.recipient_phone,
        address=form.address,
        items=cart.items,
        delivery_date=form.delivery_date,
        delivery_time=form.delivery_time,
        note=form.note,
        card=GreetingCard(
            to=form.card_to.strip(),
            message=form.card_message.strip(),
            sender=form.card_from.strip(),
        ),
    )


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, form: OrderForm, item_specs: list[OrderItemSpec]) -> OrderDTO:
        order = build_order(form, item_specs)
        created = self._order_repo.create(order)
        logger.info("Created order %s for %s", created.id, created.customer_name)
        return order_to_dto(created)
