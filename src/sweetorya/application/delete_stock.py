"""Application service: Delete Stock use case."""

from __future__ import annotations

import logging

from sweetorya.domain.model.stock import StockKind
from sweetorya.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class DeleteStockHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def handle(self, kind: StockKind, item_id: str) -> None:
        self._stock_repo.delete(kind, item_id)
        logger.info("Deleted %s '%s'", kind.value, item_id)
