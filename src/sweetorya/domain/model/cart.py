"""Cart — the draft line items of an order being entered.

Lives only on the client until the order is submitted.  The backend
recomputes the total on submission.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.order import OrderLineItem
from sweetorya.domain.model.value_objects import Money, Quantity, to_decimal


@dataclass
class Cart:

    items: list[OrderLineItem] = field(default_factory=list)

    def add_item(self, variant_name: str, quantity: str | int, unit_price: str | int) -> OrderLineItem:
        """Append a line after checking that name, quantity and price are present."""
        if not variant_name or not str(variant_name).strip() or quantity in (None, "") or unit_price in (None, ""):
            raise ValidationError("Variant name, quantity and unit price are all required")

        try:
            qty = int(quantity)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid quantity: {quantity!r}") from exc

        item = OrderLineItem(
            variant_name=str(variant_name).strip(),
            quantity=Quantity(qty),
            unit_price=Money(to_decimal(unit_price, "unit price")),
        )
        self.items.append(item)
        return item

    def remove_item(self, index: int) -> OrderLineItem:
        if not 0 <= index < len(self.items):
            raise ValidationError(f"No cart item at position {index + 1}")
        return self.items.pop(index)

    @property
    def grand_total(self) -> Money:
        total = Money.zero()
        for item in self.items:
            total = total + item.subtotal
        return total

    @property
    def is_empty(self) -> bool:
        return not self.items
