# ABOUTME: CLI package for Shelfmark, built on Click.
# ABOUTME: Defines the entry command that wires logging, a fresh catalog, and the menu loop.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from shelfmark.catalog import Catalog
from shelfmark.cli.menu import MenuSession


def _configure_logging(verbose: bool) -> None:
    """Send shelfmark logs to stderr so the menu output on stdout stays clean."""
    package_logger = logging.getLogger("shelfmark")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
        package_logger.propagate = False


@click.command()
@click.version_option(package_name="shelfmark")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log catalog activity to stderr.",
)
def cli(verbose: bool) -> None:
    """Shelfmark - an interactive library catalog manager."""
    _configure_logging(verbose)

    catalog = Catalog()
    session = MenuSession(catalog, console=Console(highlight=False, emoji=False))
    session.run()
