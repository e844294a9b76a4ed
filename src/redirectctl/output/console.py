"""Rich Console factory and theme for redirectctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

REDIRECT_THEME = Theme(
    {
        "rd.ok": "bold green",
        "rd.error": "bold red",
        "rd.warning": "bold yellow",
        "rd.op": "bold cyan",
        "rd.key": "dim",
        "rd.id": "bold blue",
        "rd.source": "bold",
        "rd.destination": "green",
        "rd.arrow": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=REDIRECT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
