"""Application service: Add Asset use case."""

from __future__ import annotations

import logging
from datetime import date

from sweetorya.application.dto import AssetLineDTO, asset_to_dto
from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.asset import Asset, AssetCondition
from sweetorya.domain.model.value_objects import Money, Quantity, to_decimal
from sweetorya.domain.repository.asset_repository import AssetRepository

logger = logging.getLogger(__name__)


def parse_quantity(raw: str | int) -> Quantity:
    try:
        return Quantity(int(raw))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid quantity: {raw!r}") from exc


class AddAssetHandler:

    def __init__(self, asset_repo: AssetRepository) -> None:
        self._asset_repo = asset_repo

    def handle(
        self,
        name: str,
        quantity: str | int,
        unit_price: str,
        condition: AssetCondition = AssetCondition.GOOD,
        purchase_date: date | None = None,
    ) -> AssetLineDTO:
        asset = Asset.create(
            name=name,
            quantity=parse_quantity(quantity),
            unit_price=Money(to_decimal(unit_price, "unit price")),
            condition=condition,
            purchase_date=purchase_date,
        )
        self._asset_repo.add(asset)
        logger.info("Added asset '%s' (%s)", asset.name, asset.total_price)
        return asset_to_dto(asset)
