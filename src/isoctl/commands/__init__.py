"""isoctl subcommands.

Each entry of ``COMMANDS`` names a module and the click command or group it
defines; :func:`register_commands` attaches them to the root group in this
order.  Command modules import their services inside the callbacks.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click

COMMANDS: tuple[tuple[str, str], ...] = (
    # groups
    ("isoctl.commands.week", "week"),
    ("isoctl.commands.ordinal", "ordinal"),
    ("isoctl.commands.duration", "duration"),
    # standalone
    ("isoctl.commands.weekday", "weekday"),
    ("isoctl.commands.layout", "layout"),
)


def register_commands(cli: click.Group) -> None:
    for module_name, attr in COMMANDS:
        cli.add_command(getattr(importlib.import_module(module_name), attr))
