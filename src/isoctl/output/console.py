"""Rich console and theme used for human-readable isoctl output.

Consoles write into a StringIO so renderers return plain strings and the
CLI decides which stream they go to.  Rich drops color codes on its own
when the destination is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 100

ISO_THEME = Theme(
    {
        "iso.ok": "bold green",
        "iso.error": "bold red",
        "iso.warning": "bold yellow",
        "iso.op": "bold cyan",
        "iso.code": "magenta",
        "iso.key": "dim",
        "iso.value": "bold",
        "iso.text": "bold green",
        "iso.date": "bold blue",
        "iso.number": "cyan",
    }
)

# Result fields that hold ISO 8601 text or a calendar date.
_KEY_STYLES: dict[str, str] = {
    "text": "iso.text",
    "canonical": "iso.text",
    "date": "iso.date",
}


def style_for(key: str, value: object) -> str:
    """Theme style for the value of result field *key*."""
    if key in _KEY_STYLES:
        return _KEY_STYLES[key]
    if isinstance(value, int | float) and not isinstance(value, bool):
        return "iso.number"
    return "iso.value"


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """StringIO-backed Console; *width* defaults to DEFAULT_WIDTH."""
    return Console(
        file=StringIO(),
        theme=ISO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
