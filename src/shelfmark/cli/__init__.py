# ABOUTME: CLI package for shelfmark, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from shelfmark.cli.commands import (
    add_cmd,
    author_cmd,
    backfill_cmd,
    genres_cmd,
    ls_cmd,
    quote_cmd,
    retag_cmd,
    rm_cmd,
    scan_cmd,
    wishlist_cmd,
)


def _configure_logging(verbose: int) -> None:
    """Route log records through Rich; -v for INFO, -vv for DEBUG."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="shelfmark")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v, -vv).")
def cli(verbose: int) -> None:
    """shelfmark - catalog your books from photos of their spines."""
    _configure_logging(verbose)


cli.add_command(add_cmd.add)
cli.add_command(scan_cmd.scan)
cli.add_command(ls_cmd.ls)
cli.add_command(rm_cmd.rm)
cli.add_command(wishlist_cmd.wishlist)
cli.add_command(genres_cmd.genres)
cli.add_command(retag_cmd.retag)
cli.add_command(author_cmd.author)
cli.add_command(quote_cmd.quote)
cli.add_command(backfill_cmd.backfill)
