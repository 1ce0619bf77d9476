"""Application service: Edit Asset use case.

The total price is derived from quantity and unit price, so editing
either one recomputes it.
"""

from __future__ import annotations

import logging
from datetime import date

from sweetorya.application.add_asset import parse_quantity
from sweetorya.application.dto import AssetLineDTO, asset_to_dto
from sweetorya.application.list_assets import find_asset
from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.asset import AssetCondition
from sweetorya.domain.model.value_objects import Money, to_decimal
from sweetorya.domain.repository.asset_repository import AssetRepository

logger = logging.getLogger(__name__)


class EditAssetHandler:

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    def handle(
        self,
        asset_id: str,
        name: str | None = None,
        quantity: str | int | None = None,
        unit_price: str | None = None,
        condition: AssetCondition | None = None,
        purchase_date: date | None = None,
    ) -> AssetLineDTO:
        asset = find_asset(self._asset_repo, asset_id)

        if name is not None:
            if not name.strip():
                raise ValidationError("Asset name is required")
            asset.name = name.strip()
        if quantity is not None:
            asset.quantity = parse_quantity(quantity)
        if unit_price is not None:
            asset.unit_price = Money(to_decimal(unit_price, "unit price"))
        if condition is not None:
            asset.condition = condition
        if purchase_date is not None:
            asset.purchase_date = purchase_date

        self._asset_repo.update(asset)
        logger.info("Updated asset '%s'", asset_id)
        return asset_to_dto(asset)
