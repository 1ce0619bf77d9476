"""Conversions between backend JSON values and domain types."""

from __future__ import annotations

import functools
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, TypeVar

from sweetorya.domain.exceptions import BackendError

E = TypeVar("E", bound=Enum)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_datetime(raw: str | None) -> datetime:
    """Parse an ISO timestamp such as ``2024-05-01T10:00:00.000Z`` as UTC."""
    if not raw:
        return EPOCH
    value = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def parse_date(raw: str | None) -> date | None:
    if not raw:
        return None
    return date.fromisoformat(raw[:10])


def parse_decimal(raw: Any) -> Decimal:
    if raw is None or raw == "":
        return Decimal("0")
    try:
        return Decimal(str(raw))
    except InvalidOperation:
        return Decimal("0")


def json_number(value: Decimal) -> int | float:
    """Render a Decimal the way the backend stores numbers."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def format_date(value: date | None) -> str | None:
    return value.isoformat() if value else None


def parse_enum(enum_cls: type[E], raw: Any, default: E) -> E:
    """Map a backend string onto *enum_cls*; null or unknown values fall back to *default*."""
    try:
        return enum_cls(raw)
    except ValueError:
        return default


def record_mapper(what: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Report a backend record that cannot be mapped as a BackendError."""

    def decorate(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise BackendError(f"Unreadable {what} record from the server: {exc}") from exc

        return wrapper

    return decorate
