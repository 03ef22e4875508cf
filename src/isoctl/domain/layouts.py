"""Named ISO 8601 layouts over the stdlib ``strftime``/``strptime`` facility.

Plain calendar, time-of-day, and offset rendering is delegated to
:mod:`datetime`; this module only names the layouts and fills the
directives the stdlib does not render the ISO way (``%Y`` zero-padded to four
digits, ``%f`` at millisecond precision and ``%:z`` with a colon-separated
offset).
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from isoctl.domain.errors import IsoFormatError


class Layout(StrEnum):
    """Layout templates, expressed as strftime directives."""

    YEAR = "%Y"
    YEAR_MONTH = "%Y-%m"
    FULL_DATE = "%Y-%m-%d"
    HOURS_MINUTES = "%H:%M"
    HOURS_MINUTES_SECONDS = "%H:%M:%S"
    FULL_TIME = "%H:%M:%S.%f"
    TZ_ZULU = "Z"
    TZ_OFFSET = "%:z"
    DATETIME_ZULU = "%Y-%m-%dT%H:%M:%S.%fZ"
    RFC3339 = "%Y-%m-%dT%H:%M:%S%:z"

    @property
    def is_zulu(self) -> bool:
        return self.value.endswith("Z")


def _offset(value: datetime) -> str:
    delta = value.utcoffset()
    if delta is None:
        return ""
    minutes = int(delta.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_datetime(value: datetime, layout: Layout) -> str:
    """Render *value* with *layout*.

    Aware values are shifted to UTC before a Zulu layout is applied.
    """
    if layout.is_zulu and value.tzinfo is not None:
        value = value.astimezone(UTC)
    template = layout.value.replace("%Y", f"{value.year:04d}")
    template = template.replace("%f", f"{value.microsecond // 1000:03d}")
    template = template.replace("%:z", _offset(value))
    return value.strftime(template)


def parse_datetime(text: str, layout: Layout) -> datetime:
    """Parse *text* with *layout*.

    Zulu layouts yield UTC-aware values; offset layouts yield aware values
    with a fixed offset; everything else is naive.

    Raises:
        IsoFormatError: *text* does not fit *layout*.
    """
    template = layout.value.replace("%:z", "%z")
    try:
        parsed = datetime.strptime(text, template)
    except ValueError as exc:
        msg = f"{text!r} does not match layout {layout.name}"
        raise IsoFormatError(msg, value=text) from exc
    if layout.is_zulu:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
