"""Tests for the HTTP repositories' wire mapping."""

import json
from datetime import date, datetime, timezone
from decimal import Decimal

import httpx
import pytest

from sweetorya.application.recap import LOAD_ERROR_MESSAGE, RecapViewModel
from sweetorya.domain.exceptions import AuthenticationError, BackendError
from sweetorya.domain.model.asset import Asset, AssetCondition
from sweetorya.domain.model.order import OrderStatus, PaymentStatus, StatusUpdate
from sweetorya.domain.model.stock import StockItem, StockKind
from sweetorya.domain.model.value_objects import Money, Quantity
from sweetorya.infrastructure.http.api_client import ApiClient
from sweetorya.infrastructure.http.http_asset_repository import HttpAssetRepository
from sweetorya.infrastructure.http.http_auth_repository import (
    LOGIN_FAILED_MESSAGE,
    HttpAuthRepository,
)
from sweetorya.infrastructure.http.http_order_repository import HttpOrderRepository
from sweetorya.infrastructure.http.http_stock_repository import HttpStockRepository
from tests.fakes import make_order

RAW_ORDER = {
    "_id": "665f1c2ab7e4d90012abcdef",
    "createdAt": "2024-05-10T08:30:00.000Z",
    "nama_pemesan": "Alice",
    "telp_pemesan": "0811",
    "nama_penerima": "Bob",
    "telp_penerima": "0812",
    "alamat_pengiriman": "Jl. Mawar 1",
    "items": [
        {"nama_varian": "Box 6pcs", "harga_satuan": 10000, "jumlah": 3, "subtotal": 30000},
        {"nama_varian": "Tart", "harga_satuan": 25000, "jumlah": 1, "subtotal": 25000},
    ],
    "harga_total": 55000,
    "tgl_kirim": "2024-05-12T00:00:00.000Z",
    "jam_kirim": "14:00",
    "catatan": "",
    "ucapan_untuk": "Bob",
    "ucapan_isi": "HBD",
    "ucapan_dari": "Alice",
    "status_pesanan": "Selesai",
    "status_pembayaran": "Belum Lunas",
    "link_testimoni": "",
}


class Recorder:
    """Mock transport handler that records requests and replays canned bodies."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        status, body = self.routes.get((request.method, request.url.path), (200, None))
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def payload(self, index=-1):
        return json.loads(self.requests[index].content)


def _client(routes):
    recorder = Recorder(routes)
    client = ApiClient("http://backend.test/api", token="t", transport=httpx.MockTransport(recorder))
    return recorder, client


class TestHttpOrderRepository:

    def test_list_page(self):
        recorder, client = _client({
            ("GET", "/api/orders"): (200, {"orders": [RAW_ORDER], "currentPage": 2, "totalPages": 4}),
        })

        page = HttpOrderRepository(client).list_page(2, 20, "alice")

        assert dict(recorder.requests[0].url.params) == {"page": "2", "limit": "20", "search": "alice"}
        assert page.current_page == 2
        assert page.total_pages == 4
        order = page.orders[0]
        assert order.short_id == "#ABCDEF"
        assert order.total == Money.of("55000")
        assert order.items[0].quantity == Quantity(3)
        assert order.status is OrderStatus.COMPLETED
        assert order.payment_status is PaymentStatus.UNPAID
        assert order.delivery_date == date(2024, 5, 12)
        assert order.created_at == datetime(2024, 5, 10, 8, 30, tzinfo=timezone.utc)
        assert order.card.message == "HBD"

    @pytest.mark.parametrize("status, payment", [(None, None), ("Dibatalkan", "DP")])
    def test_unknown_statuses_read_as_open_and_unpaid(self, status, payment):
        raw = dict(RAW_ORDER, status_pesanan=status, status_pembayaran=payment)
        _, client = _client({
            ("GET", "/api/orders"): (200, {"orders": [raw], "currentPage": 1, "totalPages": 1}),
        })

        order = HttpOrderRepository(client).list_page(1, 20).orders[0]

        assert order.status is OrderStatus.PENDING
        assert order.payment_status is PaymentStatus.UNPAID

    def test_malformed_record_is_a_backend_error(self):
        raw = dict(RAW_ORDER, createdAt="yesterday")
        _, client = _client({
            ("GET", "/api/orders"): (200, {"orders": [raw], "currentPage": 1, "totalPages": 1}),
        })

        with pytest.raises(BackendError, match="Unreadable order record"):
            HttpOrderRepository(client).list_page(1, 20)

    def test_summary(self):
        _, client = _client({
            ("GET", "/api/orders/summary"): (200, {
                "total_pendapatan": 1500000,
                "total_pengeluaran": 1700000,
                "keuntungan_bersih": -200000,
                "jumlah_pesanan_selesai": 12,
                "pengeluaran": {"bahan": 900000, "packaging": 300000, "aset": 500000},
            }),
        })

        summary = HttpOrderRepository(client).summary()

        assert summary.net_profit == Decimal("-200000")
        assert summary.completed_orders == 12
        assert summary.breakdown.assets == Decimal("500000")

    def test_create_payload(self):
        recorder, client = _client({("POST", "/api/orders"): (201, RAW_ORDER)})
        order = make_order("ignored")

        created = HttpOrderRepository(client).create(order)

        payload = recorder.payload()
        assert payload["nama_pemesan"] == "Alice"
        assert payload["items"] == [
            {"nama_varian": "Box 6pcs", "jumlah": 2, "harga_satuan": 10000, "subtotal": 20000}
        ]
        assert "_id" not in payload
        assert "status_pesanan" not in payload
        assert created.id == RAW_ORDER["_id"]

    def test_status_update_sends_only_changed_field(self):
        recorder, client = _client({})

        HttpOrderRepository(client).update_status(
            "o1", StatusUpdate(payment_status=PaymentStatus.PAID)
        )

        assert recorder.requests[0].method == "PATCH"
        assert recorder.requests[0].url.path == "/api/orders/o1/status"
        assert recorder.payload() == {"status_pembayaran": "Lunas"}

    def test_attach_testimonial(self):
        recorder, client = _client({})
        HttpOrderRepository(client).attach_testimonial("o1", "https://ig/s/1")
        assert recorder.requests[0].url.path == "/api/orders/o1/testimonial"
        assert recorder.payload() == {"link_testimoni": "https://ig/s/1"}

    def test_suggestions(self):
        _, client = _client({
            ("GET", "/api/orders/suggestions"): (200, {
                "customers": [{"nama": "Alice", "telp": "0811"}, {"nama_pemesan": "Budi"}, {}],
                "variants": ["Tart", ""],
            }),
        })

        suggestions = HttpOrderRepository(client).suggestions()

        assert [c.name for c in suggestions.customers] == ["Alice", "Budi"]
        assert suggestions.variants == ["Tart"]


class TestHttpStockRepository:

    def test_list_parses_material(self):
        _, client = _client({
            ("GET", "/api/bahan"): (200, [{
                "_id": "b1", "nama_bahan": "Tepung", "stok": 12.5, "satuan": "kg",
                "modal_dikeluarkan": 250000, "tgl_beli": "2024-05-01", "supplier": "Toko A",
            }]),
        })

        item = HttpStockRepository(client).list_all(StockKind.MATERIAL)[0]

        assert item.name == "Tepung"
        assert item.stock == Decimal("12.5")
        assert item.capital_spent == Money.of("250000")
        assert item.purchase_date == date(2024, 5, 1)

    def test_add_packaging_returns_message(self):
        recorder, client = _client({("POST", "/api/packaging"): (201, {"msg": "Stok diperbarui"})})
        item = StockItem.create(StockKind.PACKAGING, "Box", Decimal("100"), "pcs", Money.of("150000"))

        message = HttpStockRepository(client).add(item)

        assert message == "Stok diperbarui"
        payload = recorder.payload()
        assert payload["nama_packaging"] == "Box"
        assert payload["stok"] == 100
        assert payload["total_harga"] == 150000

    def test_consume_sends_delta(self):
        recorder, client = _client({})
        HttpStockRepository(client).consume(StockKind.MATERIAL, "b1", Decimal("2.5"))
        assert recorder.requests[0].url.path == "/api/bahan/b1/stock"
        assert recorder.payload() == {"jumlah_keluar": 2.5}


class TestHttpAssetRepository:

    def test_unit_price_derived_from_total(self):
        _, client = _client({
            ("GET", "/api/inventaris"): (200, [{
                "_id": "a1", "nama_barang": "Oven", "jumlah": 2, "total_harga": 3000000,
                "kondisi": "Rusak",
            }]),
        })

        asset = HttpAssetRepository(client).list_all()[0]

        assert asset.unit_price == Money.of("1500000")
        assert asset.condition is AssetCondition.DAMAGED

    def test_update_sends_recomputed_total(self):
        recorder, client = _client({})
        asset = Asset("a1", "Oven", Quantity(3), Money.of("1500000"))

        HttpAssetRepository(client).update(asset)

        assert recorder.requests[0].method == "PUT"
        assert recorder.payload()["total_harga"] == 4500000

    def test_condition_change(self):
        recorder, client = _client({})
        HttpAssetRepository(client).update_condition("a1", AssetCondition.LOST)
        assert recorder.requests[0].url.path == "/api/inventaris/a1/kondisi"
        assert recorder.payload() == {"kondisi_baru": "Hilang"}


class TestHttpAuthRepository:

    def test_token_returned(self):
        recorder, client = _client({("POST", "/api/auth/login"): (200, {"token": "jwt"})})
        assert HttpAuthRepository(client).login("admin", "pw") == "jwt"
        assert recorder.payload() == {"username": "admin", "password": "pw"}

    def test_rejected_with_server_message(self):
        _, client = _client({("POST", "/api/auth/login"): (400, {"msg": "Password salah"})})
        with pytest.raises(AuthenticationError, match="Password salah"):
            HttpAuthRepository(client).login("admin", "x")

    def test_missing_token(self):
        _, client = _client({("POST", "/api/auth/login"): (200, {})})
        with pytest.raises(AuthenticationError) as info:
            HttpAuthRepository(client).login("admin", "x")
        assert str(info.value) == LOGIN_FAILED_MESSAGE


SUMMARY = {
    "total_pendapatan": 100000,
    "total_pengeluaran": 40000,
    "keuntungan_bersih": 60000,
    "jumlah_pesanan_selesai": 1,
    "pengeluaran": {"bahan": 20000, "packaging": 10000, "aset": 10000},
}


class TestRecapOverHttp:

    def test_null_status_still_loads(self):
        raw = dict(RAW_ORDER, status_pesanan=None)
        done = dict(RAW_ORDER, _id="665f1c2ab7e4d90012000002", createdAt="2024-05-11T08:00:00Z")
        _, client = _client({
            ("GET", "/api/orders/summary"): (200, SUMMARY),
            ("GET", "/api/orders"): (200, {"orders": [done, raw], "currentPage": 1, "totalPages": 1}),
        })
        view = RecapViewModel(HttpOrderRepository(client))

        assert view.load(1) is True

        assert view.state.error is None
        assert [o.id for o in view.state.orders] == [RAW_ORDER["_id"], done["_id"]]
        assert view.orders[0].status == "Belum Selesai"

    def test_malformed_record_keeps_previous_state(self):
        routes = {
            ("GET", "/api/orders/summary"): (200, SUMMARY),
            ("GET", "/api/orders"): (200, {"orders": [RAW_ORDER], "currentPage": 1, "totalPages": 1}),
        }
        _, client = _client(routes)
        view = RecapViewModel(HttpOrderRepository(client))
        view.load(1)
        before = list(view.state.orders)

        broken = dict(RAW_ORDER, items=[{"nama_varian": "Tart", "harga_satuan": 1000}])
        routes[("GET", "/api/orders")] = (200, {"orders": [broken], "currentPage": 1, "totalPages": 1})

        assert view.load(1) is False
        assert view.state.error == LOAD_ERROR_MESSAGE
        assert view.state.orders == before


class TestAssetConditionMapping:

    @pytest.mark.parametrize("condition", [None, "Dipinjam"])
    def test_unknown_condition_reads_as_good(self, condition):
        _, client = _client({
            ("GET", "/api/inventaris"): (200, [{
                "_id": "a1", "nama_barang": "Loyang", "jumlah": 4, "harga_satuan": 50000,
                "kondisi": condition,
            }]),
        })

        asset = HttpAssetRepository(client).list_all()[0]

        assert asset.condition is AssetCondition.GOOD
