"""Application service: Change Asset Condition use case."""

from __future__ import annotations

import logging

from sweetorya.application.list_assets import find_asset
from sweetorya.domain.model.asset import AssetCondition
from sweetorya.domain.repository.asset_repository import AssetRepository

logger = logging.getLogger(__name__)


class ChangeAssetConditionHandler:

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    def handle(self, asset_id: str, condition: AssetCondition) -> AssetCondition:
        """Set any condition.  The backend accepts every enum value."""
        self._asset_repo.update_condition(asset_id, condition)
        logger.info("Asset '%s' is now %s", asset_id, condition.value)
        return condition

    def toggle(self, asset_id: str) -> AssetCondition:
        """Flip Good -> Damaged or Damaged/Lost -> Good."""
        asset = find_asset(self._asset_repo, asset_id)
        return self.handle(asset_id, asset.toggled_condition)
