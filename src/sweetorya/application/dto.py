"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is pre-formatted
as Rupiah and dates as the id-ID short form (``19/10/2026``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from sweetorya.domain.model.asset import Asset, AssetCondition
from sweetorya.domain.model.order import Order
from sweetorya.domain.model.stock import StockItem
from sweetorya.domain.model.summary import FinancialSummary
from sweetorya.domain.model.value_objects import format_rupiah


def format_date(value: date | datetime | None) -> str:
    if value is None:
        return "-"
    return f"{value.day}/{value.month}/{value.year}"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one cart line as typed by the user."""

    variant_name: str
    quantity: str
    unit_price: str


@dataclass(frozen=True)
class OrderForm:
    """Input: the customer, delivery and card fields of the order form."""

    customer_name: str
    customer_phone: str
    recipient_name: str
    recipient_phone: str
    address: str
    delivery_date: date | None = None
    delivery_time: str = ""
    note: str = ""
    card_to: str = ""
    card_message: str = ""
    card_from: str = ""


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    variant_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "Rp 10.000"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    short_id: str
    created_at: str
    customer_name: str
    customer_phone: str
    recipient_name: str
    recipient_phone: str
    address: str
    items: list[OrderLineItemDTO]
    total: str
    delivery_date: str
    delivery_time: str
    note: str
    card_to: str
    card_message: str
    card_from: str
    status: str
    payment_status: str
    testimonial_url: str
    is_completed: bool
    is_paid: bool


@dataclass(frozen=True)
class SummaryDTO:
    revenue: str
    expenditure: str
    net_profit: str
    completed_orders: int
    materials: str
    packaging: str
    assets: str
    is_loss: bool


@dataclass(frozen=True)
class StockLineDTO:
    id: str
    name: str
    stock: str
    unit: str
    capital_spent: str
    purchase_date: str
    supplier: str


@dataclass(frozen=True)
class AssetLineDTO:
    id: str
    name: str
    quantity: int
    unit_price: str
    total_price: str
    condition: str
    purchase_date: str
    needs_attention: bool


# --- Mapping -----------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id or "",
        short_id=order.short_id,
        created_at=format_date(order.created_at),
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        recipient_name=order.recipient_name,
        recipient_phone=order.recipient_phone,
        address=order.address,
        items=[
            OrderLineItemDTO(
                variant_name=item.variant_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in order.items
        ],
        total=str(order.total),
        delivery_date=format_date(order.delivery_date),
        delivery_time=order.delivery_time,
        note=order.note,
        card_to=order.card.to,
        card_message=order.card.message,
        card_from=order.card.sender,
        status=order.status.value,
        payment_status=order.payment_status.value,
        testimonial_url=order.testimonial_url,
        is_completed=order.is_completed,
        is_paid=order.is_paid,
    )


def summary_to_dto(summary: FinancialSummary) -> SummaryDTO:
    return SummaryDTO(
        revenue=format_rupiah(summary.revenue),
        expenditure=format_rupiah(summary.expenditure),
        net_profit=format_rupiah(summary.net_profit),
        completed_orders=summary.completed_orders,
        materials=format_rupiah(summary.breakdown.materials),
        packaging=format_rupiah(summary.breakdown.packaging),
        assets=format_rupiah(summary.breakdown.assets),
        is_loss=summary.net_profit < 0,
    )


def stock_to_dto(item: StockItem) -> StockLineDTO:
    return StockLineDTO(
        id=item.id or "",
        name=item.name,
        stock=f"{item.stock.normalize():f}",
        unit=item.unit,
        capital_spent=str(item.capital_spent),
        purchase_date=format_date(item.purchase_date),
        supplier=item.supplier or "-",
    )


def asset_to_dto(asset: Asset) -> AssetLineDTO:
    return AssetLineDTO(
        id=asset.id or "",
        name=asset.name,
        quantity=asset.quantity.value,
        unit_price=str(asset.unit_price),
        total_price=str(asset.total_price),
        condition=asset.condition.value,
        purchase_date=format_date(asset.purchase_date),
        needs_attention=asset.condition != AssetCondition.GOOD,
    )
