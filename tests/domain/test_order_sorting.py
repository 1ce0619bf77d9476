"""Unit tests for the order display priority."""

from datetime import datetime, timedelta, timezone

from sweetorya.domain.model.order import OrderStatus
from sweetorya.domain.service.order_sorting import sort_orders
from tests.fakes import make_order

NOW = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


def _at(hours_ago: int):
    return NOW - timedelta(hours=hours_ago)


class TestSortOrders:

    def test_pending_before_completed_even_if_older(self):
        pending_yesterday = make_order("p", OrderStatus.PENDING, _at(24))
        completed_today = make_order("c", OrderStatus.COMPLETED, _at(0))

        result = sort_orders([completed_today, pending_yesterday])

        assert [o.id for o in result] == ["p", "c"]

    def test_newest_first_within_group(self):
        orders = [
            make_order("old", OrderStatus.PENDING, _at(48)),
            make_order("new", OrderStatus.PENDING, _at(1)),
            make_order("mid", OrderStatus.PENDING, _at(12)),
        ]
        assert [o.id for o in sort_orders(orders)] == ["new", "mid", "old"]

    def test_grouping_and_monotonic_timestamps(self):
        statuses = [OrderStatus.PENDING, OrderStatus.COMPLETED]
        orders = [
            make_order(f"o{i}", statuses[i % 2], _at((i * 7) % 13))
            for i in range(12)
        ]

        result = sort_orders(orders)

        flags = [o.is_completed for o in result]
        assert flags == sorted(flags)
        for group in (False, True):
            stamps = [o.created_at for o in result if o.is_completed is group]
            assert all(a >= b for a, b in zip(stamps, stamps[1:]))

    def test_stable_for_equal_keys(self):
        orders = [make_order(f"o{i}", OrderStatus.PENDING, _at(1)) for i in range(4)]
        assert [o.id for o in sort_orders(orders)] == ["o0", "o1", "o2", "o3"]

    def test_input_not_mutated(self):
        orders = [
            make_order("c", OrderStatus.COMPLETED, _at(0)),
            make_order("p", OrderStatus.PENDING, _at(5)),
        ]
        sort_orders(orders)
        assert [o.id for o in orders] == ["c", "p"]

    def test_empty(self):
        assert sort_orders([]) == []
