"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the HTTP repositories
but keep everything in memory. No network, no side effects.  Each fake
records the calls it receives so tests can assert that a rejected input
never reached the backend.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal

from sweetorya.domain.exceptions import (
    AuthenticationError,
    BackendError,
    EntityNotFoundError,
    NetworkError,
)
from sweetorya.domain.model.asset import Asset, AssetCondition
from sweetorya.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentStatus,
    StatusUpdate,
)
from sweetorya.domain.model.session import Session
from sweetorya.domain.model.stock import StockItem, StockKind
from sweetorya.domain.model.summary import (
    ExpenditureBreakdown,
    FinancialSummary,
    OrderPage,
    Suggestions,
)
from sweetorya.domain.model.value_objects import Money, Quantity
from sweetorya.domain.repository.asset_repository import AssetRepository
from sweetorya.domain.repository.order_repository import OrderRepository
from sweetorya.domain.repository.report_repository import ReportRepository
from sweetorya.domain.repository.session_repository import AuthRepository, SessionRepository
from sweetorya.domain.repository.stock_repository import StockRepository


def make_order(
    order_id: str,
    status: OrderStatus = OrderStatus.PENDING,
    created_at: datetime | None = None,
    customer_name: str = "Alice",
    payment_status: PaymentStatus = PaymentStatus.UNPAID,
) -> Order:
    items = [
        OrderLineItem("Box 6pcs", Quantity(2), Money.of("10000")),
    ]
    return Order(
        id=order_id,
        customer_name=customer_name,
        customer_phone="0811",
        recipient_name="Bob",
        recipient_phone="0812",
        address="Jl. Mawar 1",
        items=items,
        total=Money.of("20000"),
        status=status,
        payment_status=payment_status,
        created_at=created_at or datetime(2024, 5, 1, tzinfo=timezone.utc),
    )


def make_summary(revenue: str = "100000") -> FinancialSummary:
    return FinancialSummary(
        revenue=Decimal(revenue),
        expenditure=Decimal("40000"),
        net_profit=Decimal(revenue) - Decimal("40000"),
        completed_orders=3,
        breakdown=ExpenditureBreakdown(
            materials=Decimal("25000"),
            packaging=Decimal("5000"),
            assets=Decimal("10000"),
        ),
    )


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[str, Order] = {o.id: o for o in orders or []}
        self._next_id = 1
        self.summary_value = make_summary()
        self.suggestions_value = Suggestions()
        self.calls: list[tuple] = []
        self.fail_reads = False
        self.fail_writes = False

    # --- reads ---

    def list_page(self, page: int, limit: int, search: str = "") -> OrderPage:
        self.calls.append(("list_page", page, limit, search))
        if self.fail_reads:
            raise NetworkError("offline")
        needle = search.lower()
        matches = [
            o for o in self._store.values()
            if not needle
            or needle in o.customer_name.lower()
            or needle in o.recipient_name.lower()
            or needle in o.status.value.lower()
        ]
        total_pages = max(math.ceil(len(matches) / limit), 1)
        start = (page - 1) * limit
        return OrderPage(
            orders=matches[start:start + limit],
            current_page=page,
            total_pages=total_pages,
        )

    def get_by_id(self, order_id: str) -> Order:
        self.calls.append(("get_by_id", order_id))
        if order_id not in self._store:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return self._store[order_id]

    def summary(self) -> FinancialSummary:
        self.calls.append(("summary",))
        if self.fail_reads:
            raise NetworkError("offline")
        return self.summary_value

    def suggestions(self) -> Suggestions:
        self.calls.append(("suggestions",))
        return self.suggestions_value

    # --- writes ---

    def _check_write(self) -> None:
        if self.fail_writes:
            raise BackendError("Server error")

    def create(self, order: Order) -> Order:
        self.calls.append(("create",))
        self._check_write()
        order.id = f"order{self._next_id:06d}"
        self._next_id += 1
        self._store[order.id] = order
        return order

    def replace(self, order_id: str, order: Order) -> Order:
        self.calls.append(("replace", order_id))
        self._check_write()
        self._store[order_id] = order
        return order

    def delete(self, order_id: str) -> None:
        self.calls.append(("delete", order_id))
        self._check_write()
        self._store.pop(order_id, None)

    def update_status(self, order_id: str, update: StatusUpdate) -> None:
        self.calls.append(("update_status", order_id, update))
        self._check_write()
        order = self._store[order_id]
        if update.order_status is not None:
            order.status = update.order_status
        if update.payment_status is not None:
            order.payment_status = update.payment_status

    def attach_testimonial(self, order_id: str, url: str) -> None:
        self.calls.append(("attach_testimonial", order_id, url))
        self._check_write()
        self._store[order_id].testimonial_url = url

    def call_names(self) -> list[str]:
        return [c[0] for c in self.calls]


class FakeStockRepository(StockRepository):
    """Applies consumption the way the backend does, rejecting overdraws."""

    def __init__(self, items: list[StockItem] | None = None) -> None:
        self._store: dict[str, StockItem] = {}
        for item in items or []:
            self._store[item.id] = item
        self.calls: list[tuple] = []

    def list_all(self, kind: StockKind, search: str = "") -> list[StockItem]:
        self.calls.append(("list_all", kind, search))
        return [
            i for i in self._store.values()
            if i.kind is kind and search.lower() in i.name.lower()
        ]

    def add(self, item: StockItem) -> str:
        self.calls.append(("add", item.name))
        for existing in self._store.values():
            if existing.kind is item.kind and existing.name.lower() == item.name.lower():
                existing.stock += item.stock
                existing.capital_spent = existing.capital_spent + item.capital_spent
                return f"Stok {existing.name} ditambahkan."
        item.id = f"stock{len(self._store) + 1}"
        self._store[item.id] = item
        return f"{item.name} disimpan."

    def update(self, item: StockItem) -> None:
        self.calls.append(("update", item.id))
        self._store[item.id] = item

    def delete(self, kind: StockKind, item_id: str) -> None:
        self.calls.append(("delete", kind, item_id))
        self._store.pop(item_id, None)

    def consume(self, kind: StockKind, item_id: str, delta: Decimal) -> None:
        self.calls.append(("consume", kind, item_id, delta))
        item = self._store[item_id]
        if delta > item.stock:
            raise BackendError("Stok tidak mencukupi", status_code=400)
        item.stock -= delta

    def call_names(self) -> list[str]:
        return [c[0] for c in self.calls]


class FakeAssetRepository(AssetRepository):

    def __init__(self, assets: list[Asset] | None = None) -> None:
        self._store: dict[str, Asset] = {}
        for asset in assets or []:
            self._store[asset.id] = asset
        self.calls: list[tuple] = []

    def list_all(self, search: str = "") -> list[Asset]:
        self.calls.append(("list_all", search))
        return [a for a in self._store.values() if search.lower() in a.name.lower()]

    def add(self, asset: Asset) -> None:
        self.calls.append(("add", asset.name))
        asset.id = f"asset{len(self._store) + 1}"
        self._store[asset.id] = asset

    def update(self, asset: Asset) -> None:
        self.calls.append(("update", asset.id))
        self._store[asset.id] = asset

    def update_condition(self, asset_id: str, condition: AssetCondition) -> None:
        self.calls.append(("update_condition", asset_id, condition))
        self._store[asset_id].condition = condition

    def delete(self, asset_id: str) -> None:
        self.calls.append(("delete", asset_id))
        self._store.pop(asset_id, None)

    def get(self, asset_id: str) -> Asset:
        return self._store[asset_id]


class FakeReportRepository(ReportRepository):

    def __init__(self, content: bytes = b"PK\x03\x04xlsx", fail: bool = False) -> None:
        self.content = content
        self.fail = fail

    def download(self) -> bytes:
        if self.fail:
            raise NetworkError("offline")
        return self.content


class FakeAuthRepository(AuthRepository):

    def __init__(self, users: dict[str, str] | None = None) -> None:
        self._users = users or {}
        self.attempts: list[str] = []

    def login(self, username: str, password: str) -> str:
        self.attempts.append(username)
        if self._users.get(username) != password:
            raise AuthenticationError("Username atau password salah")
        return f"token-for-{username}"


class FakeSessionRepository(SessionRepository):

    def __init__(self, session: Session | None = None) -> None:
        self.session = session or Session.anonymous()
        self.saves = 0

    def load(self) -> Session:
        return self.session

    def save(self, session: Session) -> None:
        self.saves += 1
        self.session = session

    def clear(self) -> None:
        self.session = Session.anonymous()
