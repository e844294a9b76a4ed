"""Command: dry-run validation of a candidate rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from redirectctl.commands._base import RdCommand

if TYPE_CHECKING:
    from redirectctl.commands._context import AppContext


@click.command(
    cls=RdCommand,
    examples="""\
  redirectctl check m.example.com example.com
  redirectctl --json check example.com shop.example.com""",
)
@click.argument("source")
@click.argument("destination")
@click.pass_obj
def check(app: AppContext, source: str, destination: str) -> None:
    """Check whether SOURCE -> DESTINATION would be accepted, without adding it."""
    app.emit(app.rules.check_rule(source, destination))
