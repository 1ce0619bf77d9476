"""Domain service: order display priority.

Open work comes first: every pending order is listed before every
completed one, and each group runs newest first.

Only the orders handed in are sorted.  The recap applies this to the
page it fetched, so a pending order on page 2 still sits below the
completed orders of page 1.
"""

from __future__ import annotations

from sweetorya.domain.model.order import Order


def sort_orders(orders: list[Order]) -> list[Order]:
    """Return a new list: pending before completed, then newest first.

    Both passes use Python's stable sort, so orders with equal status and
    timestamp keep their incoming relative order.
    """
    by_recency = sorted(orders, key=lambda o: o.created_at, reverse=True)
    return sorted(by_recency, key=lambda o: o.is_completed)
