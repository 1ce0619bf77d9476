"""Application service: Consume Stock use case.

Checks the requested amount against the stock the backend last reported
before sending anything, then sends the delta.  The backend re-checks and
its rejection message is surfaced as-is.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sweetorya.application.dto import StockLineDTO, stock_to_dto
from sweetorya.application.list_stock import find_stock_item
from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.stock import StockKind
from sweetorya.domain.model.value_objects import to_decimal
from sweetorya.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class ConsumeStockHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def handle(self, kind: StockKind, item_id: str, amount: str | Decimal) -> StockLineDTO:
        """Take *amount* out of a stock line and return the refreshed line."""
        delta = to_decimal(amount, "amount")
        if delta <= 0:
            raise ValidationError("Amount to consume must be positive")

        item = find_stock_item(self._stock_repo, kind, item_id)
        item.check_consume(delta)

        self._stock_repo.consume(kind, item_id, delta)
        logger.info("Consumed %s %s of %s '%s'", delta, item.unit, kind.value, item.name)

        return stock_to_dto(find_stock_item(self._stock_repo, kind, item_id))
