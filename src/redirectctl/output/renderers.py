"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from redirectctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from redirectctl.services.result import ServiceResult

ARROW = "→"
NO_RULES_TEXT = "No redirection rules yet."
CURRENT_RULES_TEXT = "Current rules:"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # Rule listings print one id per line
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rd.ok")
    op = Text(f"  {result.op}", style="rd.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="rd.key")
    if key == "id":
        v = Text(str(value), style="rd.id")
    elif key == "source":
        v = Text(str(value), style="rd.source")
    elif key == "destination":
        v = Text(str(value), style="rd.destination")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _rule_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for a list of rules."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="rd.id", no_wrap=True)
    table.add_column("Source", style="rd.source")
    table.add_column("", style="rd.arrow")
    table.add_column("Destination", style="rd.destination")
    table.add_column("Regex")
    if verbose:
        table.add_column("Index", justify="right", style="dim")

    for item in items:
        # User-supplied patterns may contain [brackets]; keep them out of markup.
        row = [
            Text(str(item.get("id", ""))),
            Text(str(item.get("source", ""))),
            Text(ARROW),
            Text(str(item.get("destination", ""))),
            Text("yes" if item.get("is_regex") else "no"),
        ]
        if verbose:
            row.append(Text(str(item.get("index", ""))))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rd.error")
    op = Text(f"  {result.op}", style="rd.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add_rule/delete_rule results."""
    _status_line(console, result)
    for key in ("id", "source", "destination", "is_regex", "subdomain_delta"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_rule_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print(NO_RULES_TEXT)
        return
    console.print(CURRENT_RULES_TEXT)
    console.print(_rule_table(items, verbose=verbose))
    console.print(f"\n{result.data.get('count', len(items))} rules")


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    line = Text("  ")
    line.append(str(d.get("source", "")), style="rd.source")
    line.append(f" {ARROW} ", style="rd.arrow")
    line.append(str(d.get("destination", "")), style="rd.destination")
    console.print(line)
    _field(console, "outcome", d.get("outcome", ""))
    if verbose or d.get("subdomain_delta"):
        _field(console, "subdomain_delta", d.get("subdomain_delta", 0))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "add_rule": _render_mutation,
    "delete_rule": _render_mutation,
    "list_rules": _render_rule_list,
    "check_rule": _render_check,
}
