"""Order aggregate — the core of the domain.

The backend owns and persists orders.  The client holds transient copies
and only ever changes them through three narrow channels: the status
delta, the testimonial link, and a full replace in edit mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from sweetorya.domain.exceptions import ValidationError
from sweetorya.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Belum Selesai"
    COMPLETED = "Selesai"


class PaymentStatus(Enum):
    UNPAID = "Belum Lunas"
    PAID = "Lunas"


@dataclass(frozen=True)
class OrderLineItem:
    """One cart line: a product variant at a given unit price."""

    variant_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class GreetingCard:
    """Optional greeting card attached to an order."""

    to: str = ""
    message: str = ""
    sender: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.to or self.message or self.sender)


@dataclass(frozen=True)
class StatusUpdate:
    """A partial status delta: completion, payment, or both."""

    order_status: OrderStatus | None = None
    payment_status: PaymentStatus | None = None

    def __post_init__(self) -> None:
        if self.order_status is None and self.payment_status is None:
            raise ValidationError("Status update must change at least one status")


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders. It runs the presence checks.
    ``__init__`` stays simple so repositories can reconstitute backend
    records without re-validating.  For a reconstituted order ``total`` is
    the backend's figure and is treated as authoritative.
    """

    id: str | None
    customer_name: str
    customer_phone: str
    recipient_name: str
    recipient_phone: str
    address: str
    items: list[OrderLineItem]
    total: Money
    delivery_date: date | None = None
    delivery_time: str = ""
    note: str = ""
    card: GreetingCard = field(default_factory=GreetingCard)
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    testimonial_url: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        customer_phone: str,
        recipient_name: str,
        recipient_phone: str,
        address: str,
        items: list[OrderLineItem],
        delivery_date: date | None = None,
        delivery_time: str = "",
        note: str = "",
        card: GreetingCard | None = None,
    ) -> Order:
        """Build a new order, enforcing the required fields."""
        required = {
            "Customer name": customer_name,
            "Customer phone": customer_phone,
            "Recipient name": recipient_name,
            "Recipient phone": recipient_phone,
            "Delivery address": address,
        }
        for label, value in required.items():
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for item in items:
            total = total + item.subtotal

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            customer_phone=customer_phone.strip(),
            recipient_name=recipient_name.strip(),
            recipient_phone=recipient_phone.strip(),
            address=address.strip(),
            items=list(items),
            total=total,
            delivery_date=delivery_date,
            delivery_time=delivery_time.strip(),
            note=note.strip(),
            card=card or GreetingCard(),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def short_id(self) -> str:
        """Display id: last six characters, upper-cased."""
        return f"#{(self.id or '')[-6:].upper()}"

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    @property
    def has_testimonial(self) -> bool:
        return bool(self.testimonial_url)
