"""Application service: List Stock use case (query)."""

from __future__ import annotations

from sweetorya.application.dto import StockLineDTO, stock_to_dto
from sweetorya.domain.exceptions import EntityNotFoundError
from sweetorya.domain.model.stock import StockItem, StockKind
from sweetorya.domain.repository.stock_repository import StockRepository


def find_stock_item(
    stock_repo: StockRepository, kind: StockKind, item_id: str
) -> StockItem:
    """Look up one stock line.  The backend has no single-item GET for stock."""
    for item in stock_repo.list_all(kind):
        if item.id == item_id:
            return item
    raise EntityNotFoundError(f"{kind.label} '{item_id}' not found")


class ListStockHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def handle(self, kind: StockKind, search: str = "") -> list[StockLineDTO]:
        return [stock_to_dto(item) for item in self._stock_repo.list_all(kind, search)]
