"""Command: re-render a timestamp between named layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isoctl.commands._base import IsoCommand
from isoctl.domain.layouts import Layout

if TYPE_CHECKING:
    from isoctl.commands._context import AppContext

_LAYOUT_NAMES = [layout.name for layout in Layout]


@click.command(
    cls=IsoCommand,
    examples="""\
  isoctl layout 2020-01-01T15:30:10-08:00 --from RFC3339 --to FULL_DATE
  isoctl layout 2020-01-01T15:30:10-08:00 --from RFC3339 --to DATETIME_ZULU
  isoctl layout 15:30:10.693 --from FULL_TIME --to HOURS_MINUTES""",
)
@click.argument("text")
@click.option(
    "--from",
    "source",
    type=click.Choice(_LAYOUT_NAMES, case_sensitive=False),
    default=Layout.RFC3339.name,
    show_default=True,
    help="Layout TEXT is written in.",
)
@click.option(
    "--to",
    "target",
    type=click.Choice(_LAYOUT_NAMES, case_sensitive=False),
    required=True,
    help="Layout to render.",
)
@click.pass_obj
def layout(app: AppContext, text: str, source: str, target: str) -> None:
    """Parse TEXT with one layout and render it with another."""
    from isoctl.services.layout import LayoutService

    service = app.service(LayoutService)
    app.emit(service.reformat(text, Layout[source.upper()], Layout[target.upper()]))
