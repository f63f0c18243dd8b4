import click

from catalog.infrastructure.bootstrap import log_json, log_level
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
)
from catalog.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    "level",
    default=log_level,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level.",
)
def cli(level: str) -> None:
    """Catalog: product catalog service"""
    configure_logging(level=level, json_output=log_json())


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
