"""Rich renderers for ServiceResult.

Every successful result renders as a status line followed by a key/value
table; failures render the error code, message, and offending input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from isoctl.output.console import create_console, get_output, style_for

if TYPE_CHECKING:
    from rich.console import Console

    from isoctl.services.result import ServiceResult

# The one field printed in --quiet mode, per operation.
QUIET_FIELDS: dict[str, str] = {
    "weekday": "name",
    "year_weeks": "weeks",
    "format_week": "text",
    "parse_week": "date",
    "format_ordinal": "text",
    "parse_ordinal": "date",
    "format_duration": "text",
    "parse_duration": "total_seconds",
    "duration_between": "text",
    "reformat_datetime": "text",
}


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)
    if result.ok:
        _render_success(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    key = QUIET_FIELDS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="iso.ok") if result.ok else Text("ERROR", style="iso.error")
    console.print(label, Text(f"  {result.op}", style="iso.op"))


def _kv_table(rows: dict[str, Any]) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="iso.key")
    table.add_column()
    for key, value in rows.items():
        table.add_row(key, Text(str(value), style=style_for(key, value)))
    return table


def _render_success(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    if result.data:
        console.print(_kv_table(result.data))
    if verbose and result.meta:
        console.print(_kv_table(result.meta))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    if result.error is None:
        console.print("Unknown error")
        return
    console.print(Text(f"[{result.error.code}] ", style="iso.code"), Text(result.error.message))
    if verbose and result.error.detail:
        console.print(_kv_table(result.error.detail))
