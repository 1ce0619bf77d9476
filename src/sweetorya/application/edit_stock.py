"""Application service: Edit Stock use case.

Only the fields given are changed; everything else keeps the value the
backend last reported.
"""

from __future__ import annotations

import logging
from datetime import date

from sweetorya.application.list_stock import find_stock_item
from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.stock import StockKind
from sweetorya.domain.model.value_objects import Money, to_decimal
from sweetorya.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class EditStockHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def handle(
        self,
        kind: StockKind,
        item_id: str,
        name: str | None = None,
        stock: str | None = None,
        unit: str | None = None,
        capital_spent: str | None = None,
        purchase_date: date | None = None,
        supplier: str | None = None,
    ) -> None:
        item = find_stock_item(self._stock_repo, kind, item_id)

        if name is not None:
            if not name.strip():
                raise ValidationError(f"{kind.label} name is required")
            item.name = name.strip()
        if stock is not None:
            value = to_decimal(stock, "stock")
            if value < 0:
                raise ValidationError("Stock cannot be negative")
            item.stock = value
        if unit is not None:
            if unit not in kind.units:
                raise ValidationError(
                    f"Unknown unit '{unit}' (expected one of: {', '.join(kind.units)})"
                )
            item.unit = unit
        if capital_spent is not None:
            item.capital_spent = Money(to_decimal(capital_spent, "capital"))
        if purchase_date is not None:
            item.purchase_date = purchase_date
        if supplier is not None:
            item.supplier = supplier.strip()

        self._stock_repo.update(item)
        logger.info("Updated %s '%s'", kind.value, item_id)
