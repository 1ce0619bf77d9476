"""Abstract source of the downloadable spreadsheet report."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ReportRepository(ABC):

    @abstractmethod
    def download(self) -> bytes:
        """Return the raw bytes of the current report."""
