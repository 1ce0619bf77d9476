"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The CLI keeps one ``Container`` on the click context.  The stored session
is read here and nowhere else; authenticated repositories cannot be built
without one.
"""

from __future__ import annotations

import httpx

from sweetorya.application.login import require_session
from sweetorya.domain.model.session import Session
from sweetorya.infrastructure.config import Settings
from sweetorya.infrastructure.http.api_client import ApiClient
from sweetorya.infrastructure.http.http_asset_repository import HttpAssetRepository
from sweetorya.infrastructure.http.http_auth_repository import HttpAuthRepository
from sweetorya.infrastructure.http.http_order_repository import HttpOrderRepository
from sweetorya.infrastructure.http.http_report_repository import HttpReportRepository
from sweetorya.infrastructure.http.http_stock_repository import HttpStockRepository
from sweetorya.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)


class Container:

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport
        self._clients: list[ApiClient] = []

    @staticmethod
    def from_env() -> Container:
        return Container(Settings.from_env())

    # --- Session --------------------------------------------------------------

    def session_repository(self) -> JsonSessionRepository:
        return JsonSessionRepository(self.settings.session_file)

    def session(self) -> Session:
        return self.session_repository().load()

    # --- HTTP -----------------------------------------------------------------

    def api_client(self, authenticated: bool = True) -> ApiClient:
        token = require_session(self.session()).token if authenticated else ""
        client = ApiClient(
            self.settings.api_base_url,
            token=token,
            timeout=self.settings.timeout,
            transport=self._transport,
        )
        self._clients.append(client)
        return client

    def close(self) -> None:
        for client in self._clients:
            client.close()
        self._clients.clear()

    # --- Repositories ---------------------------------------------------------

    def auth_repository(self) -> HttpAuthRepository:
        return HttpAuthRepository(self.api_client(authenticated=False))

    def order_repository(self) -> HttpOrderRepository:
        return HttpOrderRepository(self.api_client())

    def stock_repository(self) -> HttpStockRepository:
        return HttpStockRepository(self.api_client())

    def asset_repository(self) -> HttpAssetRepository:
        return HttpAssetRepository(self.api_client())

    def report_repository(self) -> HttpReportRepository:
        return HttpReportRepository(self.api_client())
