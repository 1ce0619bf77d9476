"""CLI commands for orders and the recap dashboard."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from sweetorya.application.create_order import CreateOrderHandler
from sweetorya.application.delete_order import DeleteOrderHandler
from sweetorya.application.download_report import DownloadReportHandler
from sweetorya.application.dto import OrderDTO, OrderForm, OrderItemSpec, SummaryDTO
from sweetorya.application.edit_order import EditOrderHandler
from sweetorya.application.recap import RecapViewModel
from sweetorya.application.show_order import ShowOrderHandler
from sweetorya.application.show_suggestions import ShowSuggestionsHandler
from sweetorya.domain.exceptions import DomainException
from sweetorya.infrastructure.bootstrap import Container

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _parse_items(raw_items: tuple[str, ...]) -> list[OrderItemSpec]:
    """Parse ('Box 6pcs:3:10000', ...) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for raw in raw_items:
        parts = raw.rsplit(":", 2)
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'Variant:Quantity:UnitPrice'."
            )
        name, qty, price = (p.strip() for p in parts)
        specs.append(OrderItemSpec(variant_name=name, quantity=qty, unit_price=price))
    return specs


def _as_date(value: datetime | None):
    return value.date() if value else None


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying one order in full."""
    click.echo(f"Order {dto.short_id}  ({dto.status} / {dto.payment_status})")
    click.echo(f"Created:   {dto.created_at}")
    click.echo(f"Customer:  {dto.customer_name}  ({dto.customer_phone})")
    click.echo(f"Recipient: {dto.recipient_name}  ({dto.recipient_phone})")
    click.echo(f"Address:   {dto.address}")
    if dto.delivery_date != "-" or dto.delivery_time:
        time = f" {dto.delivery_time} WIB" if dto.delivery_time else ""
        click.echo(f"Delivery:  {dto.delivery_date}{time}")
    click.echo()
    click.echo(f"  {'Variant':<28} {'Qty':>5} {'Price':>14} {'Subtotal':>14}")
    click.echo(f"  {'-'*64}")
    for item in dto.items:
        click.echo(
            f"  {item.variant_name:<28} {item.quantity:>5} {item.unit_price:>14} {item.subtotal:>14}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Total':<34} {dto.total:>29}")

    if dto.note:
        click.echo()
        click.echo(f"Note: {dto.note}")
    if dto.card_to or dto.card_message or dto.card_from:
        click.echo()
        click.echo("Greeting card")
        click.echo(f"  To:      {dto.card_to or '-'}")
        click.echo(f"  Message: {dto.card_message or '-'}")
        click.echo(f"  From:    {dto.card_from or '-'}")
    if dto.testimonial_url:
        click.echo()
        click.echo(f"Testimonial: {dto.testimonial_url}")


def _display_summary(summary: SummaryDTO) -> None:
    click.echo(f"{'Paid revenue':<22} {summary.revenue:>18}")
    click.echo(f"{'Total expenditure':<22} {summary.expenditure:>18}")
    profit = f"{summary.net_profit:>18}"
    click.echo(f"{'Net profit':<22} " + click.style(profit, fg="yellow" if summary.is_loss else "blue"))
    click.echo(f"{'Completed orders':<22} {summary.completed_orders:>18}")
    click.echo()
    click.echo(f"  {'Materials':<20} {summary.materials:>18}")
    click.echo(f"  {'Packaging':<20} {summary.packaging:>18}")
    click.echo(f"  {'Assets':<20} {summary.assets:>18}")


def _display_recap(view: RecapViewModel) -> None:
    summary = view.summary
    if summary is not None:
        _display_summary(summary)
        click.echo()

    state = view.state
    if state.active_search:
        click.echo(f'Search results for: "{state.active_search}"')

    orders = view.orders
    if not orders:
        click.echo("No orders found.")
    else:
        click.echo(
            f"{'ID':<9} {'Date':<11} {'Customer':<20} {'Recipient':<20} "
            f"{'Total':>14}  {'Status':<14} {'Payment':<12} Testimonial"
        )
        click.echo("-" * 118)
        for o in orders:
            line = (
                f"{o.short_id:<9} {o.created_at:<11} {o.customer_name[:20]:<20} "
                f"{o.recipient_name[:20]:<20} {o.total:>14}  {o.status:<14} "
                f"{o.payment_status:<12} {'yes' if o.testimonial_url else '-'}"
            )
            click.echo(line if o.is_completed else click.style(line, fg="magenta"))

    click.echo()
    click.echo(f"Page {state.current_page} of {state.total_pages}")


def _display_after_update(view: RecapViewModel, message: str) -> None:
    """Confirm a mutation and show the recap as the backend now reports it."""
    click.echo(message)
    click.echo()
    if view.state.error:
        click.secho(f"Could not refresh the recap: {view.state.error}", fg="yellow", err=True)
        return
    _display_recap(view)


@click.command("recap")
@click.option("--page", default=1, type=int, show_default=True, help="Page to show.")
@click.option("--search", default="", help="Filter by customer, recipient or status.")
@click.pass_obj
def order_recap(container: Container, page: int, search: str) -> None:
    """Show the financial summary and a page of orders (open orders first)."""
    try:
        view = RecapViewModel(container.order_repository())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not view.load(max(page, 1), search):
        raise click.ClickException(view.state.error or "Failed to load data.")

    _display_recap(view)


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--customer-phone", required=True, help="Customer phone.")
@click.option("--recipient", required=True, help="Recipient name.")
@click.option("--recipient-phone", required=True, help="Recipient phone.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--item", "items", multiple=True, required=True,
              help="Cart line as 'Variant:Quantity:UnitPrice'. Repeatable.")
@click.option("--delivery-date", type=_DATE, default=None, help="Delivery date (YYYY-MM-DD).")
@click.option("--delivery-time", default="", help="Delivery time, e.g. 14:00.")
@click.option("--note", default="", help="Free-text note.")
@click.option("--card-to", default="", help="Greeting card: to.")
@click.option("--card-message", default="", help="Greeting card: message.")
@click.option("--card-from", default="", help="Greeting card: from.")
@click.pass_obj
def order_create(
    container: Container,
    customer: str,
    customer_phone: str,
    recipient: str,
    recipient_phone: str,
    address: str,
    items: tuple[str, ...],
    delivery_date: datetime | None,
    delivery_time: str,
    note: str,
    card_to: str,
    card_message: str,
    card_from: str,
) -> None:
    """Create a new order."""
    specs = _parse_items(items)
    form = OrderForm(
        customer_name=customer,
        customer_phone=customer_phone,
        recipient_name=recipient,
        recipient_phone=recipient_phone,
        address=address,
        delivery_date=_as_date(delivery_date),
        delivery_time=delivery_time,
        note=note,
        card_to=card_to,
        card_message=card_message,
        card_from=card_from,
    )

    try:
        handler = CreateOrderHandler(order_repo=container.order_repository())
        dto = handler.handle(form, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.short_id} created.")
    click.echo()
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: str) -> None:
    """Show details of an existing order."""
    try:
        handler = ShowOrderHandler(order_repo=container.order_repository())
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("edit")
@click.option("--id", "order_id", required=True, help="Order ID to edit.")
@click.option("--customer", default=None, help="Customer name.")
@click.option("--customer-phone", default=None, help="Customer phone.")
@click.option("--recipient", default=None, help="Recipient name.")
@click.option("--recipient-phone", default=None, help="Recipient phone.")
@click.option("--address", default=None, help="Delivery address.")
@click.option("--item", "items", multiple=True,
              help="Replace the cart; 'Variant:Quantity:UnitPrice'. Repeatable.")
@click.option("--delivery-date", type=_DATE, default=None, help="Delivery date (YYYY-MM-DD).")
@click.option("--delivery-time", default=None, help="Delivery time.")
@click.option("--note", default=None, help="Free-text note.")
@click.option("--card-to", default=None, help="Greeting card: to.")
@click.option("--card-message", default=None, help="Greeting card: message.")
@click.option("--card-from", default=None, help="Greeting card: from.")
@click.pass_obj
def order_edit(
    container: Container,
    order_id: str,
    customer: str | None,
    customer_phone: str | None,
    recipient: str | None,
    recipient_phone: str | None,
    address: str | None,
    items: tuple[str, ...],
    delivery_date: datetime | None,
    delivery_time: str | None,
    note: str | None,
    card_to: str | None,
    card_message: str | None,
    card_from: str | None,
) -> None:
    """Edit an order. Fields not given keep their current value."""
    specs = _parse_items(items) if items else None

    try:
        handler = EditOrderHandler(order_repo=container.order_repository())
        dto = handler.handle(
            order_id,
            item_specs=specs,
            customer_name=customer,
            customer_phone=customer_phone,
            recipient_name=recipient,
            recipient_phone=recipient_phone,
            address=address,
            delivery_date=_as_date(delivery_date),
            delivery_time=delivery_time,
            note=note,
            card_to=card_to,
            card_message=card_message,
            card_from=card_from,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.short_id} updated.")
    click.echo()
    _display_order(dto)


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
@click.confirmation_option(prompt="Delete this order permanently?")
@click.pass_obj
def order_delete(container: Container, order_id: str) -> None:
    """Permanently delete an order."""
    try:
        handler = DeleteOrderHandler(order_repo=container.order_repository())
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")


@click.command("complete")
@click.option("--id", "order_id", required=True, help="Order ID to mark as completed.")
@click.pass_obj
def order_complete(container: Container, order_id: str) -> None:
    """Mark an order as completed (Selesai)."""
    try:
        view = RecapViewModel(container.order_repository())
        view.mark_completed(order_id)
    except DomainException as exc:
        raise click.ClickException(f"Failed to update status: {exc}")

    _display_after_update(view, "Status updated.")


@click.command("paid")
@click.option("--id", "order_id", required=True, help="Order ID to mark as paid.")
@click.pass_obj
def order_paid(container: Container, order_id: str) -> None:
    """Mark an order as paid (Lunas)."""
    try:
        view = RecapViewModel(container.order_repository())
        view.mark_paid(order_id)
    except DomainException as exc:
        raise click.ClickException(f"Failed to update status: {exc}")

    _display_after_update(view, "Status updated.")


@click.command("testimonial")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--url", required=True, help="Link to the customer's story/testimonial.")
@click.pass_obj
def order_testimonial(container: Container, order_id: str, url: str) -> None:
    """Attach a testimonial link to an order."""
    try:
        view = RecapViewModel(container.order_repository())
        view.set_testimonial_draft(order_id, url)
        view.attach_testimonial(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_after_update(view, "Testimonial link saved.")


@click.command("report")
@click.option("--dir", "directory", default=".", show_default=True,
              type=click.Path(file_okay=False, path_type=Path),
              help="Directory to save the spreadsheet into.")
@click.pass_obj
def order_report(container: Container, directory: Path) -> None:
    """Download the Excel report."""
    try:
        view = RecapViewModel(
            container.order_repository(),
            report_handler=DownloadReportHandler(container.report_repository()),
        )
        path = view.download_report(directory)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Report saved to {path}")


@click.command("suggest")
@click.option("--prefix", default="", help="Only names starting with this text.")
@click.pass_obj
def order_suggest(container: Container, prefix: str) -> None:
    """List known customers and variants for quick entry."""
    try:
        handler = ShowSuggestionsHandler(order_repo=container.order_repository())
        suggestions = handler.handle(prefix)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Customers:")
    for c in suggestions.customers:
        click.echo(f"  {c.name:<28} {c.phone}")
    if not suggestions.customers:
        click.echo("  -")
    click.echo("Variants:")
    for v in suggestions.variants:
        click.echo(f"  {v}")
    if not suggestions.variants:
        click.echo("  -")
