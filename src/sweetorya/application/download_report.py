"""Application service: Download Report use case."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from sweetorya.domain.exceptions import BackendError, DomainException
from sweetorya.domain.repository.report_repository import ReportRepository

logger = logging.getLogger(__name__)

REPORT_PREFIX = "Laporan_Sweetorya"


def report_filename(today: date) -> str:
    return f"{REPORT_PREFIX}_{today.isoformat()}.xlsx"


class DownloadReportHandler:

    def __init__(self, report_repo: ReportRepository) -> None:
        self._report_repo = report_repo

    def handle(self, directory: Path, today: date | None = None) -> Path:
        """Fetch the spreadsheet and save it under *directory*.

        Any failure is reported as one generic error; the cause is logged.
        """
        try:
            content = self._report_repo.download()
        except DomainException as exc:
            logger.error("Report download failed: %s", exc)
            raise BackendError("Failed to download the report.") from exc

        target = Path(directory) / report_filename(today or date.today())
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            logger.error("Saving report to %s failed: %s", target, exc)
            raise BackendError("Failed to download the report.") from exc
        logger.info("Saved report to %s (%d bytes)", target, len(content))
        return target
