"""Command: delete a redirection rule by ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from redirectctl.commands._base import RdCommand

if TYPE_CHECKING:
    from redirectctl.commands._context import AppContext


@click.command(
    cls=RdCommand,
    examples="""\
  redirectctl remove rule-0
  redirectctl remove 3
  redirectctl --json remove rule-2""",
)
@click.argument("rule_id")
@click.pass_obj
def remove(app: AppContext, rule_id: str) -> None:
    """Delete the rule with RULE_ID (as shown by `redirectctl list`)."""
    app.emit(app.rules.delete_rule(rule_id))
