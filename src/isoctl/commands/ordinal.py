"""Command group: ordinal dates (YYYY-DDD)."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from isoctl.commands._base import IsoGroup
from isoctl.commands._types import CIVIL_DATE

if TYPE_CHECKING:
    from isoctl.commands._context import AppContext


@click.group(
    cls=IsoGroup,
    examples="""\
  isoctl ordinal format 2020-12-31
  isoctl ordinal parse 2020-366""",
)
def ordinal() -> None:
    """Convert between calendar dates and ordinal dates (YYYY-DDD)."""


@ordinal.command(
    "format",
    examples="""\
  isoctl ordinal format 2020-12-31
  isoctl -q ordinal format 2021-02-01""",
)
@click.argument("day", metavar="DATE", type=CIVIL_DATE)
@click.pass_obj
def format_cmd(app: AppContext, day: date) -> None:
    """Render DATE as YYYY-DDD."""
    from isoctl.services.ordinal import OrdinalService

    app.emit(app.service(OrdinalService).format(day))


@ordinal.command(
    "parse",
    examples="""\
  isoctl ordinal parse 2020-366
  isoctl --json ordinal parse 1981-095""",
)
@click.argument("text")
@click.pass_obj
def parse_cmd(app: AppContext, text: str) -> None:
    """Resolve YYYY-DDD to a calendar date."""
    from isoctl.services.ordinal import OrdinalService

    app.emit(app.service(OrdinalService).parse(text))
