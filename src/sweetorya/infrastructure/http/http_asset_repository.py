"""HTTP implementation of AssetRepository (``/inventaris``)."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sweetorya.domain.model.asset import Asset, AssetCondition
from sweetorya.domain.model.value_objects import Money, Quantity
from sweetorya.domain.repository.asset_repository import AssetRepository
from sweetorya.infrastructure.http.api_client import ApiClient
from sweetorya.infrastructure.http.fields import (
    format_date,
    json_number,
    parse_date,
    parse_decimal,
    parse_enum,
    record_mapper,
)


class HttpAssetRepository(AssetRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- AssetRepository interface --------------------------------------------

    def list_all(self, search: str = "") -> list[Asset]:
        body = self._client.get("/inventaris", params={"search": search})
        return [self._to_domain(raw) for raw in body or []]

    def add(self, asset: Asset) -> None:
        self._client.post("/inventaris", self._to_raw(asset))

    def update(self, asset: Asset) -> None:
        self._client.put(f"/inventaris/{asset.id}", self._to_raw(asset))

    def update_condition(self, asset_id: str, condition: AssetCondition) -> None:
        self._client.patch(f"/inventaris/{asset_id}/kondisi", {"kondisi_baru": condition.value})

    def delete(self, asset_id: str) -> None:
        self._client.delete(f"/inventaris/{asset_id}")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(asset: Asset) -> dict[str, Any]:
        return {
            "nama_barang": asset.name,
            "jumlah": asset.quantity.value,
            "harga_satuan": json_number(asset.unit_price.amount),
            "total_harga": json_number(asset.total_price.amount),
            "kondisi": asset.condition.value,
            "tgl_beli": format_date(asset.purchase_date),
        }

    @staticmethod
    @record_mapper("asset")
    def _to_domain(raw: dict[str, Any]) -> Asset:
        quantity = int(raw.get("jumlah") or 1)
        unit_price = raw.get("harga_satuan")
        if unit_price is None:
            # Older records only carry the total.
            total = parse_decimal(raw.get("total_harga", raw.get("modal_dikeluarkan")))
            unit_price = total / Decimal(quantity)
        return Asset(
            id=raw.get("_id"),
            name=raw.get("nama_barang", ""),
            quantity=Quantity(quantity),
            unit_price=Money(parse_decimal(unit_price)),
            condition=parse_enum(AssetCondition, raw.get("kondisi"), AssetCondition.GOOD),
            purchase_date=parse_date(raw.get("tgl_beli")),
        )
