import click

from aquaworld.infrastructure.bootstrap import build_repositories
from aquaworld.infrastructure.cli.catalog_commands import (
    catalog_add,
    catalog_category,
    catalog_in_stock,
    catalog_list,
    catalog_search,
    catalog_show,
    catalog_update,
)
from aquaworld.infrastructure.cli.order_commands import demo, order_place
from aquaworld.infrastructure.config import Settings
from aquaworld.infrastructure.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """AquaWorld pet store order core."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings)
    ctx.obj = build_repositories(settings)


@cli.group()
def catalog() -> None:
    """Browse and maintain products."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
catalog.add_command(catalog_add)
catalog.add_command(catalog_category)
catalog.add_command(catalog_in_stock)
catalog.add_command(catalog_list)
catalog.add_command(catalog_search)
catalog.add_command(catalog_show)
catalog.add_command(catalog_update)
order.add_command(order_place)
cli.add_command(demo)
