"""Asset aggregate — fixed equipment (inventaris)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.value_objects import Money, Quantity


class AssetCondition(Enum):
    GOOD = "Baik"
    DAMAGED = "Rusak"
    LOST = "Hilang"


@dataclass
class Asset:
    """A piece of equipment bought for the shop.

    ``total_price`` is always ``quantity * unit_price``; it is a property so
    an edit can never leave it stale.
    """

    id: str | None
    name: str
    quantity: Quantity
    unit_price: Money
    condition: AssetCondition = AssetCondition.GOOD
    purchase_date: date | None = None

    @staticmethod
    def create(
        name: str,
        quantity: Quantity,
        unit_price: Money,
        condition: AssetCondition = AssetCondition.GOOD,
        purchase_date: date | None = None,
    ) -> Asset:
        if not name or not name.strip():
            raise ValidationError("Asset name is required")
        return Asset(
            id=None,
            name=name.strip(),
            quantity=quantity,
            unit_price=unit_price,
            condition=condition,
            purchase_date=purchase_date,
        )

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def toggled_condition(self) -> AssetCondition:
        """The condition the quick-toggle moves to: Good <-> Damaged.

        A lost asset is reported as found in good condition.
        """
        if self.condition == AssetCondition.GOOD:
            return AssetCondition.DAMAGED
        return AssetCondition.GOOD
