"""HTTP implementation of ReportRepository (``/reports/download``)."""

from __future__ import annotations

from sweetorya.domain.repository.report_repository import ReportRepository
from sweetorya.infrastructure.http.api_client import ApiClient


class HttpReportRepository(ReportRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def download(self) -> bytes:
        return self._client.get_bytes("/reports/download")
