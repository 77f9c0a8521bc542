import click

from pos.infrastructure.cli.product_commands import product_list
from pos.infrastructure.cli.shell_commands import shell
from pos.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    envvar="POS_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for the JSON log stream on stderr.",
)
def cli(log_level: str) -> None:
    """POS: point-of-sale billing counter"""
    configure_logging(log_level)


# Register subcommands
cli.add_command(product_list)
cli.add_command(shell)
