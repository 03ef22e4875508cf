"""Click parameter types for civil dates and timestamps."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import click


class CivilDateType(click.ParamType):
    """ISO calendar date (``YYYY-MM-DD``) converted to :class:`datetime.date`."""

    name = "date"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> date:
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(value)
        except ValueError:
            self.fail(f"{value!r} is not a YYYY-MM-DD calendar date", param, ctx)


class TimestampType(click.ParamType):
    """ISO 8601 timestamp (``YYYY-MM-DDTHH:MM:SS[.fff][Z|+HH:MM]``)."""

    name = "timestamp"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> datetime:
        if isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            self.fail(f"{value!r} is not an ISO 8601 timestamp", param, ctx)


CIVIL_DATE = CivilDateType()
TIMESTAMP = TimestampType()
