"""Command: list the current redirection rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from redirectctl.commands._base import RdCommand

if TYPE_CHECKING:
    from redirectctl.commands._context import AppContext


@click.command(
    "list",
    cls=RdCommand,
    examples="""\
  redirectctl list
  redirectctl -q list
  redirectctl --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """Show all rules in the order they were added."""
    app.emit(app.rules.list_rules())
