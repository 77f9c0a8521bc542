"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.list_products import ListProductsHandler
from pos.infrastructure.bootstrap import Settings, product_repository
from pos.infrastructure.cli.terminal_display import TerminalDisplay

demo_option = click.option(
    "--demo/--no-demo",
    "demo_catalog",
    default=True,
    show_default=True,
    envvar="POS_DEMO_CATALOG",
    help="Start with the demo catalog.",
)


@click.command("products")
@demo_option
def product_list(demo_catalog: bool) -> None:
    """List the catalog a new session starts with."""
    handler = ListProductsHandler(product_repository(Settings(demo_catalog=demo_catalog)))
    TerminalDisplay().display_product_rows(handler.view())
