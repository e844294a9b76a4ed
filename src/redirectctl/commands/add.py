"""Command: add a redirection rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from redirectctl.commands._base import RdCommand

if TYPE_CHECKING:
    from redirectctl.commands._context import AppContext


@click.command(
    cls=RdCommand,
    examples="""\
  redirectctl add m.example.com www.example.com
  redirectctl add 'https://m.example.com/' example.com
  redirectctl add --regex '^m\\.(.*)' '$1'
  redirectctl --json add m.example.com example.com""",
)
@click.argument("source")
@click.argument("destination")
@click.option("--regex", "is_regex", is_flag=True, help="Treat SOURCE as a regular expression.")
@click.pass_obj
def add(app: AppContext, source: str, destination: str, is_regex: bool) -> None:
    """Add a rule redirecting SOURCE to DESTINATION."""
    app.emit(app.rules.add_rule(source, destination, is_regex=is_regex))
