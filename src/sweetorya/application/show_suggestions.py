"""Application service: autofill suggestions for the order form (query)."""

from __future__ import annotations

from sweetorya.domain.model.summary import Suggestions
from sweetorya.domain.repository.order_repository import OrderRepository


class ShowSuggestionsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, prefix: str = "") -> Suggestions:
        """Return suggestions, keeping only names that start with *prefix*."""
        suggestions = self._order_repo.suggestions()
        if not prefix:
            return suggestions
        needle = prefix.lower()
        return Suggestions(
            customers=[c for c in suggestions.customers if c.name.lower().startswith(needle)],
            variants=[v for v in suggestions.variants if v.lower().startswith(needle)],
        )
