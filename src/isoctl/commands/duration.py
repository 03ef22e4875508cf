"""Command group: ISO 8601 durations."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

import click

from isoctl.commands._base import IsoGroup
from isoctl.commands._types import TIMESTAMP

if TYPE_CHECKING:
    from isoctl.commands._context import AppContext

_DURATION_EXAMPLES = """\
  isoctl duration parse P1DT1H
  isoctl duration parse P45DT3H3.266662S
  isoctl duration parse P1D --strict
  isoctl duration format 86400
  isoctl duration between 2020-01-02T00:00:00Z 2020-01-03T00:00:00Z"""


@click.group(cls=IsoGroup, examples=_DURATION_EXAMPLES)
def duration() -> None:
    """Convert between elapsed seconds and ISO 8601 durations."""


@duration.command(
    "parse",
    examples="""\
  isoctl duration parse PT1H2S
  isoctl -q duration parse P1DT1H
  isoctl duration parse P1Y --strict""",
)
@click.argument("text")
@click.option(
    "--strict/--compat",
    default=None,
    help="Strict ISO grammar (rejects years/months) or the compatible one.",
)
@click.pass_obj
def parse_cmd(app: AppContext, text: str, strict: bool | None) -> None:
    """Parse an ISO 8601 duration into elapsed seconds."""
    from isoctl.services.duration import DurationService

    app.emit(app.service(DurationService).parse(text, strict=strict))


@duration.command(
    "format",
    examples="""\
  isoctl duration format 3600
  isoctl duration format -- -90.5""",
)
@click.argument("seconds", type=float)
@click.pass_obj
def format_cmd(app: AppContext, seconds: float) -> None:
    """Render SECONDS of elapsed time as PT{h}H{m}M{s}S."""
    from isoctl.services.duration import DurationService

    if not math.isfinite(seconds):
        raise click.BadParameter(f"{seconds} is not a finite number", param_hint="SECONDS")
    try:
        value = timedelta(seconds=seconds)
    except OverflowError as exc:
        msg = f"{seconds} seconds is outside the representable range"
        raise click.BadParameter(msg, param_hint="SECONDS") from exc
    app.emit(app.service(DurationService).format(value))


@duration.command(
    "between",
    examples="""\
  isoctl duration between 2020-01-02T00:00:00 2020-01-02T01:00:00
  isoctl -q duration between 2020-01-02T00:00:00Z 2020-01-03T00:00:00Z""",
)
@click.argument("start", type=TIMESTAMP)
@click.argument("end", type=TIMESTAMP)
@click.pass_obj
def between(app: AppContext, start: datetime, end: datetime) -> None:
    """Elapsed time from START to END as an ISO 8601 duration."""
    from isoctl.services.duration import DurationService

    app.emit(app.service(DurationService).between(start, end))
