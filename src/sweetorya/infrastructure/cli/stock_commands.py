"""CLI commands for material (bahan) and packaging stock.

Both groups are built from the same factory; they differ only in the
unit vocabulary and whether a purchase date is required.
"""

from __future__ import annotations

from datetime import datetime

import click

from sweetorya.application.add_stock import AddStockHandler
from sweetorya.application.consume_stock import ConsumeStockHandler
from sweetorya.application.delete_stock import DeleteStockHandler
from sweetorya.application.edit_stock import EditStockHandler
from sweetorya.application.list_stock import ListStockHandler
from sweetorya.domain.exceptions import DomainException
from sweetorya.domain.model.stock import StockKind
from sweetorya.infrastructure.bootstrap import Container

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _as_date(value: datetime | None):
    return value.date() if value else None


def make_stock_group(kind: StockKind) -> click.Group:
    label = kind.label

    @click.group(kind.value, help=f"Manage {label.lower()} stock.")
    def group() -> None:
        pass

    @group.command("list")
    @click.option("--search", default="", help="Filter by name.")
    @click.pass_obj
    def stock_list(container: Container, search: str) -> None:
        """Show current stock levels."""
        try:
            lines = ListStockHandler(container.stock_repository()).handle(kind, search)
        except DomainException as exc:
            raise click.ClickException(str(exc))

        if not lines:
            click.echo(f"No {label.lower()} records found.")
            return

        click.echo(
            f"{'ID':<26} {label:<22} {'Stock':>10} {'Unit':<7} {'Capital':>15} "
            f"{'Bought':<11} Supplier"
        )
        click.echo("-" * 105)
        for line in lines:
            click.echo(
                f"{line.id:<26} {line.name[:22]:<22} {line.stock:>10} {line.unit:<7} "
                f"{line.capital_spent:>15} {line.purchase_date:<11} {line.supplier}"
            )

    @group.command("add")
    @click.option("--name", required=True, help=f"{label} name. An existing name is restocked.")
    @click.option("--stock", required=True, help="Quantity bought.")
    @click.option("--unit", required=True, type=click.Choice(kind.units), help="Unit of measure.")
    @click.option("--total-price", required=True, help="Total price paid.")
    @click.option("--purchase-date", type=_DATE, required=kind is StockKind.MATERIAL,
                  default=None, help="Purchase date (YYYY-MM-DD).")
    @click.option("--supplier", default="", help="Supplier name.")
    @click.pass_obj
    def stock_add(
        container: Container,
        name: str,
        stock: str,
        unit: str,
        total_price: str,
        purchase_date: datetime | None,
        supplier: str,
    ) -> None:
        """Add a new stock line, or restock an existing one."""
        try:
            handler = AddStockHandler(container.stock_repository())
            message = handler.handle(
                kind, name, stock, unit, total_price, _as_date(purchase_date), supplier
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

        click.echo(message)

    @group.command("consume")
    @click.option("--id", "item_id", required=True, help=f"{label} ID.")
    @click.option("--amount", required=True, help="Amount taken out of stock.")
    @click.pass_obj
    def stock_consume(container: Container, item_id: str, amount: str) -> None:
        """Take stock out (used in production)."""
        try:
            line = ConsumeStockHandler(container.stock_repository()).handle(kind, item_id, amount)
        except DomainException as exc:
            raise click.ClickException(str(exc))

        click.echo(f"Stock reduced. {line.name}: {line.stock} {line.unit} left.")

    @group.command("edit")
    @click.option("--id", "item_id", required=True, help=f"{label} ID.")
    @click.option("--name", default=None)
    @click.option("--stock", default=None)
    @click.option("--unit", default=None, type=click.Choice(kind.units))
    @click.option("--capital", default=None, help="Total capital spent.")
    @click.option("--purchase-date", type=_DATE, default=None)
    @click.option("--supplier", default=None)
    @click.pass_obj
    def stock_edit(
        container: Container,
        item_id: str,
        name: str | None,
        stock: str | None,
        unit: str | None,
        capital: str | None,
        purchase_date: datetime | None,
        supplier: str | None,
    ) -> None:
        """Correct a stock line. Fields not given are kept."""
        try:
            EditStockHandler(container.stock_repository()).handle(
                kind,
                item_id,
                name=name,
                stock=stock,
                unit=unit,
                capital_spent=capital,
                purchase_date=_as_date(purchase_date),
                supplier=supplier,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

        click.echo(f"{label} {item_id} updated.")

    @group.command("delete")
    @click.option("--id", "item_id", required=True, help=f"{label} ID.")
    @click.confirmation_option(prompt="Only for entry mistakes. Delete permanently?")
    @click.pass_obj
    def stock_delete(container: Container, item_id: str) -> None:
        """Permanently delete a stock line."""
        try:
            DeleteStockHandler(container.stock_repository()).handle(kind, item_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

        click.echo(f"{label} {item_id} deleted.")

    return group


material = make_stock_group(StockKind.MATERIAL)
packaging = make_stock_group(StockKind.PACKAGING)
