import click

from sweetorya.infrastructure.bootstrap import Container
from sweetorya.infrastructure.cli.asset_commands import (
    asset_add,
    asset_condition,
    asset_delete,
    asset_edit,
    asset_list,
)
from sweetorya.infrastructure.cli.auth_commands import login, logout, whoami
from sweetorya.infrastructure.cli.order_commands import (
    order_complete,
    order_create,
    order_delete,
    order_edit,
    order_paid,
    order_recap,
    order_report,
    order_show,
    order_suggest,
    order_testimonial,
)
from sweetorya.infrastructure.cli.stock_commands import material, packaging
from sweetorya.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log HTTP traffic.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Sweetorya Admin — orders, stock, assets and finances"""
    if ctx.obj is None:
        ctx.obj = Container.from_env()
    configure_logging("DEBUG" if verbose else ctx.obj.settings.log_level)
    ctx.call_on_close(ctx.obj.close)


@cli.group()
def order() -> None:
    """Manage orders and view the recap."""


@cli.group("aset")
def asset() -> None:
    """Manage assets (inventaris)."""


# Register subcommands
cli.add_command(login)
cli.add_command(logout)
cli.add_command(whoami)
cli.add_command(material)
cli.add_command(packaging)
order.add_command(order_complete)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_edit)
order.add_command(order_paid)
order.add_command(order_recap)
order.add_command(order_report)
order.add_command(order_show)
order.add_command(order_suggest)
order.add_command(order_testimonial)
asset.add_command(asset_add)
asset.add_command(asset_condition)
asset.add_command(asset_delete)
asset.add_command(asset_edit)
asset.add_command(asset_list)
