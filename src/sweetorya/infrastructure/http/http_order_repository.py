"""HTTP implementation of OrderRepository (``/orders``)."""

from __future__ import annotations

from typing import Any

from sweetorya.domain.model.order import (
    GreetingCard,
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentStatus,
    StatusUpdate,
)
from sweetorya.domain.model.summary import (
    CustomerContact,
    ExpenditureBreakdown,
    FinancialSummary,
    OrderPage,
    Suggestions,
)
from sweetorya.domain.model.value_objects import Money, Quantity
from sweetorya.domain.repository.order_repository import OrderRepository
from sweetorya.infrastructure.http.api_client import ApiClient
from sweetorya.infrastructure.http.fields import (
    format_date,
    json_number,
    parse_date,
    parse_datetime,
    parse_decimal,
    parse_enum,
    record_mapper,
)


class HttpOrderRepository(OrderRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- OrderRepository interface --------------------------------------------

    def list_page(self, page: int, limit: int, search: str = "") -> OrderPage:
        body = self._client.get(
            "/orders", params={"page": page, "limit": limit, "search": search}
        )
        return OrderPage(
            orders=[self._to_domain(raw) for raw in body.get("orders", [])],
            current_page=int(body.get("currentPage", page)),
            total_pages=int(body.get("totalPages", 1)),
        )

    def get_by_id(self, order_id: str) -> Order:
        return self._to_domain(self._client.get(f"/orders/{order_id}"))

    def create(self, order: Order) -> Order:
        body = self._client.post("/orders", self._to_raw(order))
        return self._to_domain(body) if body else order

    def replace(self, order_id: str, order: Order) -> Order:
        body = self._client.put(f"/orders/{order_id}", self._to_raw(order))
        return self._to_domain(body) if body else order

    def delete(self, order_id: str) -> None:
        self._client.delete(f"/orders/{order_id}")

    def update_status(self, order_id: str, update: StatusUpdate) -> None:
        payload: dict[str, str] = {}
        if update.order_status is not None:
            payload["status_pesanan"] = update.order_status.value
        if update.payment_status is not None:
            payload["status_pembayaran"] = update.payment_status.value
        self._client.patch(f"/orders/{order_id}/status", payload)

    def attach_testimonial(self, order_id: str, url: str) -> None:
        self._client.patch(f"/orders/{order_id}/testimonial", {"link_testimoni": url})

    def summary(self) -> FinancialSummary:
        body = self._client.get("/orders/summary")
        spending = body.get("pengeluaran") or {}
        return FinancialSummary(
            revenue=parse_decimal(body.get("total_pendapatan")),
            expenditure=parse_decimal(body.get("total_pengeluaran")),
            net_profit=parse_decimal(body.get("keuntungan_bersih")),
            completed_orders=int(body.get("jumlah_pesanan_selesai") or 0),
            breakdown=ExpenditureBreakdown(
                materials=parse_decimal(spending.get("bahan")),
                packaging=parse_decimal(spending.get("packaging")),
                assets=parse_decimal(spending.get("aset")),
            ),
        )

    def suggestions(self) -> Suggestions:
        body = self._client.get("/orders/suggestions") or {}
        customers = [
            CustomerContact(
                name=c.get("nama") or c.get("nama_pemesan") or "",
                phone=c.get("telp") or c.get("telp_pemesan") or "",
            )
            for c in body.get("customers", [])
        ]
        return Suggestions(
            customers=[c for c in customers if c.name],
            variants=[str(v) for v in body.get("variants", []) if v],
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict[str, Any]:
        return {
            "nama_pemesan": order.customer_name,
            "telp_pemesan": order.customer_phone,
            "nama_penerima": order.recipient_name,
            "telp_penerima": order.recipient_phone,
            "alamat_pengiriman": order.address,
            "items": [
                {
                    "nama_varian": item.variant_name,
                    "jumlah": item.quantity.value,
                    "harga_satuan": json_number(item.unit_price.amount),
                    "subtotal": json_number(item.subtotal.amount),
                }
                for item in order.items
            ],
            "tgl_kirim": format_date(order.delivery_date),
            "jam_kirim": order.delivery_time,
            "catatan": order.note,
            "ucapan_untuk": order.card.to,
            "ucapan_isi": order.card.message,
            "ucapan_dari": order.card.sender,
        }

    @staticmethod
    @record_mapper("order")
    def _to_domain(raw: dict[str, Any]) -> Order:
        items = [
            OrderLineItem(
                variant_name=i.get("nama_varian", ""),
                quantity=Quantity(int(i["jumlah"])),
                unit_price=Money(parse_decimal(i.get("harga_satuan"))),
            )
            for i in raw.get("items", [])
        ]
        return Order(
            id=raw.get("_id"),
            customer_name=raw.get("nama_pemesan", ""),
            customer_phone=raw.get("telp_pemesan", ""),
            recipient_name=raw.get("nama_penerima", ""),
            recipient_phone=raw.get("telp_penerima", ""),
            address=raw.get("alamat_pengiriman", ""),
            items=items,
            total=Money(parse_decimal(raw.get("harga_total"))),
            delivery_date=parse_date(raw.get("tgl_kirim")),
            delivery_time=raw.get("jam_kirim") or "",
            note=raw.get("catatan") or "",
            card=GreetingCard(
                to=raw.get("ucapan_untuk") or "",
                message=raw.get("ucapan_isi") or "",
                sender=raw.get("ucapan_dari") or "",
            ),
            status=parse_enum(OrderStatus, raw.get("status_pesanan"), OrderStatus.PENDING),
            payment_status=parse_enum(
                PaymentStatus, raw.get("status_pembayaran"), PaymentStatus.UNPAID
            ),
            testimonial_url=raw.get("link_testimoni") or "",
            created_at=parse_datetime(raw.get("createdAt")),
        )
