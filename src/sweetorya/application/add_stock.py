"""Application service: Add / Restock use case for materials and packaging.

The backend treats a name it already knows as a restock: stock and
capital are added to the existing line.
"""

from __future__ import annotations

import logging
from datetime import date

from sweetorya.domain.model.stock import StockItem, StockKind
from sweetorya.domain.model.value_objects import Money, to_decimal
from sweetorya.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class AddStockHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def handle(
        self,
        kind: StockKind,
        name: str,
        stock: str,
        unit: str,
        total_price: str,
        purchase_date: date | None = None,
        supplier: str = "",
    ) -> str:
        """Validate the intake form and send it.  Returns the backend message."""
        item = StockItem.create(
            kind=kind,
            name=name,
            stock=to_decimal(stock, "stock"),
            unit=unit,
            total_price=Money(to_decimal(total_price, "total price")),
            purchase_date=purchase_date,
            supplier=supplier,
        )
        message = self._stock_repo.add(item)
        logger.info("Saved %s '%s' (+%s %s)", kind.value, item.name, item.stock, item.unit)
        return message or f"{kind.label} '{item.name}' saved."
