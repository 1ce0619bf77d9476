"""HTTP implementation of StockRepository (``/bahan`` and ``/packaging``)."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sweetorya.domain.model.stock import StockItem, StockKind
from sweetorya.domain.model.value_objects import Money
from sweetorya.domain.repository.stock_repository import StockRepository
from sweetorya.infrastructure.http.api_client import ApiClient
from sweetorya.infrastructure.http.fields import (
    format_date,
    json_number,
    parse_date,
    parse_decimal,
    record_mapper,
)

_NAME_FIELDS = {
    StockKind.MATERIAL: "nama_bahan",
    StockKind.PACKAGING: "nama_packaging",
}


class HttpStockRepository(StockRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- StockRepository interface --------------------------------------------

    def list_all(self, kind: StockKind, search: str = "") -> list[StockItem]:
        body = self._client.get(f"/{kind.value}", params={"search": search})
        return [self._to_domain(kind, raw) for raw in body or []]

    def add(self, item: StockItem) -> str:
        payload = self._to_raw(item)
        payload["total_harga"] = json_number(item.capital_spent.amount)
        body = self._client.post(f"/{item.kind.value}", payload)
        return body.get("msg", "") if isinstance(body, dict) else ""

    def update(self, item: StockItem) -> None:
        payload = self._to_raw(item)
        payload["modal_dikeluarkan"] = json_number(item.capital_spent.amount)
        self._client.put(f"/{item.kind.value}/{item.id}", payload)

    def delete(self, kind: StockKind, item_id: str) -> None:
        self._client.delete(f"/{kind.value}/{item_id}")

    def consume(self, kind: StockKind, item_id: str, delta: Decimal) -> None:
        self._client.patch(
            f"/{kind.value}/{item_id}/stock", {"jumlah_keluar": json_number(delta)}
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: StockItem) -> dict[str, Any]:
        return {
            _NAME_FIELDS[item.kind]: item.name,
            "stok": json_number(item.stock),
            "satuan": item.unit,
            "tgl_beli": format_date(item.purchase_date),
            "supplier": item.supplier,
        }

    @staticmethod
    @record_mapper("stock")
    def _to_domain(kind: StockKind, raw: dict[str, Any]) -> StockItem:
        capital = raw.get("modal_dikeluarkan", raw.get("total_harga"))
        return StockItem(
            id=raw.get("_id"),
            kind=kind,
            name=raw.get(_NAME_FIELDS[kind], ""),
            stock=parse_decimal(raw.get("stok")),
            unit=raw.get("satuan", ""),
            capital_spent=Money(parse_decimal(capital)),
            purchase_date=parse_date(raw.get("tgl_beli")),
            supplier=raw.get("supplier") or "",
        )
