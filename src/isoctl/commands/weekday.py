"""Command: day of week for a calendar date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isoctl.commands._base import IsoCommand

if TYPE_CHECKING:
    from isoctl.commands._context import AppContext


@click.command(
    cls=IsoCommand,
    examples="""\
  isoctl weekday 2000 1 1
  isoctl -q weekday 2020 3 1""",
)
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@click.pass_obj
def weekday(app: AppContext, year: int, month: int, day: int) -> None:
    """Day of week for YEAR-MONTH-DAY (Monday=0 ... Sunday=6)."""
    from isoctl.services.calendar import CalendarService

    app.emit(app.service(CalendarService).weekday(year, month, day))
