"""Abstract repository for StockItem aggregates (materials and packaging)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from sweetorya.domain.model.stock import StockItem, StockKind


class StockRepository(ABC):

    @abstractmethod
    def list_all(self, kind: StockKind, search: str = "") -> list[StockItem]:
        """Return every stock line of *kind*, optionally filtered."""

    @abstractmethod
    def add(self, item: StockItem) -> str:
        """Create or restock a line.  Returns the backend's confirmation message."""

    @abstractmethod
    def update(self, item: StockItem) -> None:
        """Overwrite an existing stock line."""

    @abstractmethod
    def delete(self, kind: StockKind, item_id: str) -> None:
        """Permanently remove a stock line."""

    @abstractmethod
    def consume(self, kind: StockKind, item_id: str, delta: Decimal) -> None:
        """Take *delta* out of stock on the backend."""
