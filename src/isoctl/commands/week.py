"""Command group: ISO week dates."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from isoctl.commands._base import IsoGroup
from isoctl.commands._types import CIVIL_DATE

if TYPE_CHECKING:
    from isoctl.commands._context import AppContext

_WEEK_EXAMPLES = """\
  isoctl week format 2000-01-01
  isoctl week format 2000-01-01 --short
  isoctl week parse 1999-W52-6
  isoctl week parse 1999-W52
  isoctl week count 2004"""


@click.group(cls=IsoGroup, examples=_WEEK_EXAMPLES)
def week() -> None:
    """Convert between calendar dates and ISO week dates (YYYY-Www-D)."""


@week.command(
    "format",
    examples="""\
  isoctl week format 2020-03-01
  isoctl week format 2021-01-01 --short
  isoctl --json week format 2000-01-01""",
)
@click.argument("day", metavar="DATE", type=CIVIL_DATE)
@click.option(
    "--long/--short",
    "include_weekday",
    default=None,
    help="Include the weekday digit (default from [week] include_weekday).",
)
@click.pass_obj
def format_cmd(app: AppContext, day: date, include_weekday: bool | None) -> None:
    """Render DATE as an ISO week string."""
    from isoctl.services.week import WeekService

    app.emit(app.service(WeekService).format(day, include_weekday=include_weekday))


@week.command(
    "parse",
    examples="""\
  isoctl week parse 2020-W09-7
  isoctl -q week parse 1999-W52""",
)
@click.argument("text")
@click.pass_obj
def parse_cmd(app: AppContext, text: str) -> None:
    """Resolve an ISO week string to a calendar date (Monday if no weekday)."""
    from isoctl.services.week import WeekService

    app.emit(app.service(WeekService).parse(text))


@week.command(
    "count",
    examples="""\
  isoctl week count 2020
  isoctl -q week count 2026""",
)
@click.argument("year", type=int)
@click.pass_obj
def count(app: AppContext, year: int) -> None:
    """Number of ISO weeks (52 or 53) in YEAR."""
    from isoctl.services.calendar import CalendarService

    app.emit(app.service(CalendarService).year_weeks(year))
