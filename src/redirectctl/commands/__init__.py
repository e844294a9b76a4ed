"""Subcommand modules for redirectctl.

Provides register_commands() which uses deferred imports to keep
``redirectctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from redirectctl.commands.add import add
    from redirectctl.commands.check import check
    from redirectctl.commands.list_cmd import list_cmd
    from redirectctl.commands.remove import remove

    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(list_cmd)
    cli.add_command(check)
