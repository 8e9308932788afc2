# ABOUTME: Shared Click options for shelfmark CLI commands.
# ABOUTME: Provides reusable decorators for --db and --user, overridable from the environment.

from pathlib import Path

import click

from shelfmark.db.connection import DEFAULT_DB_PATH

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="SHELFMARK_DB",
    help=f"Path to catalog database (default: {DEFAULT_DB_PATH})",
)

user_option = click.option(
    "--user",
    "user_id",
    default="default",
    show_default=True,
    envvar="SHELFMARK_USER",
    help="User whose catalog to operate on.",
)

enrich_option = click.option(
    "--enrich/--no-enrich",
    default=True,
    help="Look up missing authors and genres on Open Library (default: --enrich).",
)
