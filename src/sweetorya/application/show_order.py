"""Application service: Show Order use case (query)."""

from __future__ import annotations

from sweetorya.application.dto import OrderDTO, order_to_dto
from sweetorya.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        return order_to_dto(self._order_repo.get_by_id(order_id))
