"""Abstract repository for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The concrete implementation talks to the backend's
``/orders`` endpoints.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sweetorya.domain.model.order import Order, StatusUpdate
from sweetorya.domain.model.summary import FinancialSummary, OrderPage, Suggestions


class OrderRepository(ABC):

    @abstractmethod
    def list_page(self, page: int, limit: int, search: str = "") -> OrderPage:
        """Return one page of orders, optionally filtered by *search*."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order:
        """Return an order by its ID; raise EntityNotFoundError if absent."""

    @abstractmethod
    def create(self, order: Order) -> Order:
        """Submit a new order and return the backend's copy of it."""

    @abstractmethod
    def replace(self, order_id: str, order: Order) -> Order:
        """Overwrite an existing order (edit mode)."""

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Permanently remove an order."""

    @abstractmethod
    def update_status(self, order_id: str, update: StatusUpdate) -> None:
        """Send a partial completion/payment status change."""

    @abstractmethod
    def attach_testimonial(self, order_id: str, url: str) -> None:
        """Store the testimonial link for an order."""

    @abstractmethod
    def summary(self) -> FinancialSummary:
        """Return the current financial snapshot."""

    @abstractmethod
    def suggestions(self) -> Suggestions:
        """Return known customers and variant names for autofill."""
