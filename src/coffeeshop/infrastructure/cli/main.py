import logging

import click

from coffeeshop.infrastructure.cli.menu_commands import menu_show
from coffeeshop.infrastructure.cli.session_commands import session

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    envvar="COFFEESHOP_LOG_LEVEL",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (also read from COFFEESHOP_LOG_LEVEL).",
)
def cli(log_level: str) -> None:
    """Coffee Shop: menu, users and orders"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(menu_show)
cli.add_command(session)
