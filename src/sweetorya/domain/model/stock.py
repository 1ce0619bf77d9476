"""StockItem aggregate — raw materials (bahan) and packaging.

Both kinds share one structure.  They differ only in the unit vocabulary
and in which purchase fields the intake form requires.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.value_objects import Money

MATERIAL_UNITS = ("ltr", "kg", "gr", "cc", "ml", "pack", "biji", "pcs", "lembar")
PACKAGING_UNITS = ("pcs", "lembar", "biji")


class StockKind(Enum):
    MATERIAL = "bahan"
    PACKAGING = "packaging"

    @property
    def units(self) -> tuple[str, ...]:
        return MATERIAL_UNITS if self is StockKind.MATERIAL else PACKAGING_UNITS

    @property
    def label(self) -> str:
        return "Bahan" if self is StockKind.MATERIAL else "Packaging"


@dataclass
class StockItem:
    """Aggregate root for a stock line.

    Stock moves on the backend: an intake under a known name restocks the
    line, and a consume subtracts from ``stock`` without touching
    ``capital_spent``.  ``check_consume()`` is the local guard that keeps a
    consume from driving ``stock`` negative.
    """

    id: str | None
    kind: StockKind
    name: str
    stock: Decimal
    unit: str
    capital_spent: Money
    purchase_date: date | None = None
    supplier: str = ""

    @staticmethod
    def create(
        kind: StockKind,
        name: str,
        stock: Decimal,
        unit: str,
        total_price: Money,
        purchase_date: date | None = None,
        supplier: str = "",
    ) -> StockItem:
        """Validate an intake form before it is sent to the backend."""
        if not name or not name.strip():
            raise ValidationError(f"{kind.label} name is required")
        if stock <= 0:
            raise ValidationError("Stock must be positive")
        if unit not in kind.units:
            raise ValidationError(
                f"Unknown unit '{unit}' (expected one of: {', '.join(kind.units)})"
            )
        if kind is StockKind.MATERIAL and purchase_date is None:
            raise ValidationError("Purchase date is required")
        return StockItem(
            id=None,
            kind=kind,
            name=name.strip(),
            stock=stock,
            unit=unit,
            capital_spent=total_price,
            purchase_date=purchase_date,
            supplier=supplier.strip(),
        )

    def check_consume(self, delta: Decimal) -> None:
        """Raise ValidationError if *delta* cannot be taken out of stock."""
        if delta <= 0:
            raise ValidationError("Amount to consume must be positive")
        if delta > self.stock:
            raise ValidationError(
                f"Insufficient stock for {self.name} "
                f"(need {delta}, have {self.stock} {self.unit})"
            )

