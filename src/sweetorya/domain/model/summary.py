"""Read-only snapshots computed by the backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from sweetorya.domain.model.order import Order


@dataclass(frozen=True)
class ExpenditureBreakdown:
    materials: Decimal = Decimal("0")
    packaging: Decimal = Decimal("0")
    assets: Decimal = Decimal("0")


@dataclass(frozen=True)
class FinancialSummary:
    """Recomputed on every fetch; the client never mutates it.

    Amounts are plain Decimals because ``net_profit`` can go negative.
    """

    revenue: Decimal
    expenditure: Decimal
    net_profit: Decimal
    completed_orders: int
    breakdown: ExpenditureBreakdown = field(default_factory=ExpenditureBreakdown)


@dataclass(frozen=True)
class OrderPage:
    orders: list[Order]
    current_page: int
    total_pages: int


@dataclass(frozen=True)
class CustomerContact:
    name: str
    phone: str


@dataclass(frozen=True)
class Suggestions:
    """Known customers and variant names, used to autofill the order form."""

    customers: list[CustomerContact] = field(default_factory=list)
    variants: list[str] = field(default_factory=list)
