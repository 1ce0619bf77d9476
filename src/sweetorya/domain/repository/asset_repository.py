"""Abstract repository for the Asset aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sweetorya.domain.model.asset import Asset, AssetCondition


class AssetRepository(ABC):

    @abstractmethod
    def list_all(self, search: str = "") -> list[Asset]:
        """Return every asset, optionally filtered."""

    @abstractmethod
    def add(self, asset: Asset) -> None:
        """Register a new asset."""

    @abstractmethod
    def update(self, asset: Asset) -> None:
        """Overwrite an existing asset."""

    @abstractmethod
    def update_condition(self, asset_id: str, condition: AssetCondition) -> None:
        """Change only the condition of an asset."""

    @abstractmethod
    def delete(self, asset_id: str) -> None:
        """Permanently remove an asset."""
