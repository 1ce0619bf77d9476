"""Application service: the order recap view-model.

Owns everything the recap screen shows: one page of orders, the financial
summary, the search keyword and page number, and the per-order testimonial
drafts.

Reload policy: every mutation (status change, testimonial) is followed by
a full ``load()`` of the current page and search.  Local state is never
patched optimistically, so what is displayed is at most one round trip
old and never shows a change the backend has not confirmed.

Failure policy:
- a failed ``load()`` keeps the previously displayed orders and summary and
  records a message in ``error``
- a failed mutation raises and leaves local state untouched
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from sweetorya.application.download_report import DownloadReportHandler
from sweetorya.application.dto import OrderDTO, SummaryDTO, order_to_dto, summary_to_dto
from sweetorya.domain.exceptions import DomainException, ValidationError
from sweetorya.domain.model.order import (
    Order,
    OrderStatus,
    PaymentStatus,
    StatusUpdate,
)
from sweetorya.domain.model.summary import FinancialSummary
from sweetorya.domain.repository.order_repository import OrderRepository
from sweetorya.domain.service.order_sorting import sort_orders

logger = logging.getLogger(__name__)

PAGE_SIZE = 20
LOAD_ERROR_MESSAGE = "Failed to load data. Try again."
INVALID_TESTIMONIAL_MESSAGE = "Enter a valid testimonial URL (starting with http/https)."


@dataclass
class RecapState:
    current_page: int = 1
    total_pages: int = 1
    active_search: str = ""
    orders: list[Order] = field(default_factory=list)
    summary: FinancialSummary | None = None
    testimonial_drafts: dict[str, str] = field(default_factory=dict)
    loading: bool = False
    error: str | None = None


class RecapViewModel:

    page_size = PAGE_SIZE

    def __init__(
        self,
        order_repo: OrderRepository,
        report_handler: DownloadReportHandler | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._report_handler = report_handler
        self.state = RecapState()

    # --- Loading --------------------------------------------------------------

    def load(self, page: int, search: str = "") -> bool:
        """Fetch the summary and one page of orders.

        Returns True on success.  Page and search are committed together
        with the data, so on failure the previous page, search, orders and
        summary all stay in place and only ``state.error`` is set.
        """
        state = self.state
        state.loading = True
        state.error = None
        try:
            summary = self._order_repo.summary()
            result = self._order_repo.list_page(page, self.page_size, search)
        except DomainException as exc:
            logger.warning("Loading recap page %d (search=%r) failed: %s", page, search, exc)
            state.error = LOAD_ERROR_MESSAGE
            return False
        finally:
            state.loading = False

        state.summary = summary
        state.active_search = search
        state.orders = sort_orders(result.orders)
        state.current_page = result.current_page
        state.total_pages = max(result.total_pages, 1)
        state.testimonial_drafts = {o.id: "" for o in state.orders if o.id}
        logger.debug(
            "Loaded page %d/%d with %d orders",
            state.current_page, state.total_pages, len(state.orders),
        )
        return True

    def reload(self) -> bool:
        return self.load(self.state.current_page, self.state.active_search)

    # --- Search & pagination --------------------------------------------------

    def search(self, keyword: str) -> bool:
        """Filter by *keyword*, starting again from the first page."""
        return self.load(1, keyword)

    def reset_search(self) -> bool:
        return self.load(1, "")

    def set_page(self, page: int) -> bool:
        """Move to *page*, clamped to the known range.  Keeps the search.

        Returns False without a request when the clamped page is the
        current one.
        """
        target = max(1, min(page, self.state.total_pages))
        if target == self.state.current_page:
            return False
        return self.load(target, self.state.active_search)

    def next_page(self) -> bool:
        return self.set_page(self.state.current_page + 1)

    def previous_page(self) -> bool:
        return self.set_page(self.state.current_page - 1)

    @property
    def has_next(self) -> bool:
        return self.state.current_page < self.state.total_pages

    @property
    def has_previous(self) -> bool:
        return self.state.current_page > 1

    # --- Mutations ------------------------------------------------------------

    def update_status(self, order_id: str, update: StatusUpdate) -> None:
        try:
            self._order_repo.update_status(order_id, update)
        except DomainException as exc:
            logger.error("Status update for order %s failed: %s", order_id, exc)
            raise
        logger.info("Updated status of order %s", order_id)
        self.reload()

    def mark_completed(self, order_id: str) -> None:
        self.update_status(order_id, StatusUpdate(order_status=OrderStatus.COMPLETED))

    def mark_paid(self, order_id: str) -> None:
        self.update_status(order_id, StatusUpdate(payment_status=PaymentStatus.PAID))

    def set_testimonial_draft(self, order_id: str, url: str) -> None:
        self.state.testimonial_drafts[order_id] = url

    def attach_testimonial(self, order_id: str) -> None:
        """Send the drafted testimonial link for *order_id*, then reload.

        A draft that is empty or does not start with ``http`` is rejected
        here without any request.
        """
        url = self.state.testimonial_drafts.get(order_id, "")
        if not url or not url.startswith("http"):
            raise ValidationError(INVALID_TESTIMONIAL_MESSAGE)
        try:
            self._order_repo.attach_testimonial(order_id, url)
        except DomainException as exc:
            logger.error("Saving testimonial for order %s failed: %s", order_id, exc)
            raise
        logger.info("Attached testimonial to order %s", order_id)
        self.reload()

    # --- Report ---------------------------------------------------------------

    def download_report(self, directory: Path) -> Path:
        """Save the spreadsheet report.  View-model state is not touched."""
        if self._report_handler is None:
            raise ValidationError("Report download is not configured")
        return self._report_handler.handle(directory)

    # --- Presentation ---------------------------------------------------------

    @property
    def orders(self) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self.state.orders]

    @property
    def summary(self) -> SummaryDTO | None:
        if self.state.summary is None:
            return None
        return summary_to_dto(self.state.summary)
