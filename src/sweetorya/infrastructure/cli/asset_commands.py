"""CLI commands for fixed assets (inventaris)."""

from __future__ import annotations

from datetime import datetime

import click

from sweetorya.application.add_asset import AddAssetHandler
from sweetorya.application.change_asset_condition import ChangeAssetConditionHandler
from sweetorya.application.delete_asset import DeleteAssetHandler
from sweetorya.application.edit_asset import EditAssetHandler
from sweetorya.application.list_assets import ListAssetsHandler
from sweetorya.domain.exceptions import DomainException
from sweetorya.domain.model.asset import AssetCondition
from sweetorya.infrastructure.bootstrap import Container

_DATE = click.DateTime(formats=["%Y-%m-%d"])
_CONDITIONS = click.Choice([c.value for c in AssetCondition])


def _as_condition(value: str | None) -> AssetCondition | None:
    return AssetCondition(value) if value else None


@click.command("list")
@click.option("--search", default="", help="Filter by name.")
@click.pass_obj
def asset_list(container: Container, search: str) -> None:
    """Show all assets."""
    try:
        lines = ListAssetsHandler(container.asset_repository()).handle(search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No assets found.")
        return

    click.echo(f"{'ID':<26} {'Asset':<24} {'Qty':>5} {'Unit price':>14} {'Total':>15} {'Condition':<10}")
    click.echo("-" * 99)
    for line in lines:
        row = (
            f"{line.id:<26} {line.name[:24]:<24} {line.quantity:>5} "
            f"{line.unit_price:>14} {line.total_price:>15} {line.condition:<10}"
        )
        click.echo(click.style(row, fg="red") if line.needs_attention else row)


@click.command("add")
@click.option("--name", required=True, help="Asset name.")
@click.option("--quantity", required=True, type=int, help="Number of units.")
@click.option("--unit-price", required=True, help="Price per unit.")
@click.option("--condition", type=_CONDITIONS, default=AssetCondition.GOOD.value, show_default=True)
@click.option("--purchase-date", type=_DATE, default=None, help="Purchase date (YYYY-MM-DD).")
@click.pass_obj
def asset_add(
    container: Container,
    name: str,
    quantity: int,
    unit_price: str,
    condition: str,
    purchase_date: datetime | None,
) -> None:
    """Register a new asset."""
    try:
        dto = AddAssetHandler(container.asset_repository()).handle(
            name,
            quantity,
            unit_price,
            AssetCondition(condition),
            purchase_date.date() if purchase_date else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Asset '{dto.name}' added ({dto.quantity} x {dto.unit_price} = {dto.total_price}).")


@click.command("edit")
@click.option("--id", "asset_id", required=True, help="Asset ID.")
@click.option("--name", default=None)
@click.option("--quantity", type=int, default=None)
@click.option("--unit-price", default=None)
@click.option("--condition", type=_CONDITIONS, default=None)
@click.option("--purchase-date", type=_DATE, default=None)
@click.pass_obj
def asset_edit(
    container: Container,
    asset_id: str,
    name: str | None,
    quantity: int | None,
    unit_price: str | None,
    condition: str | None,
    purchase_date: datetime | None,
) -> None:
    """Edit an asset. The total price is recomputed."""
    try:
        dto = EditAssetHandler(container.asset_repository()).handle(
            asset_id,
            name=name,
            quantity=quantity,
            unit_price=unit_price,
            condition=_as_condition(condition),
            purchase_date=purchase_date.date() if purchase_date else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Asset '{dto.name}' updated (total {dto.total_price}).")


@click.command("condition")
@click.option("--id", "asset_id", required=True, help="Asset ID.")
@click.option("--set", "condition", type=_CONDITIONS, default=None,
              help="New condition. Without it, toggles Baik <-> Rusak.")
@click.pass_obj
def asset_condition(container: Container, asset_id: str, condition: str | None) -> None:
    """Change the condition of an asset."""
    try:
        handler = ChangeAssetConditionHandler(container.asset_repository())
        if condition:
            result = handler.handle(asset_id, AssetCondition(condition))
        else:
            result = handler.toggle(asset_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Condition updated to {result.value}.")


@click.command("delete")
@click.option("--id", "asset_id", required=True, help="Asset ID.")
@click.confirmation_option(prompt="Only for entry mistakes. Delete permanently?")
@click.pass_obj
def asset_delete(container: Container, asset_id: str) -> None:
    """Permanently delete an asset."""
    try:
        DeleteAssetHandler(container.asset_repository()).handle(asset_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Asset {asset_id} deleted.")
