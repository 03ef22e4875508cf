"""WeekService: ISO week date formatting and parsing."""

from __future__ import annotations

from datetime import date

from isoctl.domain.errors import Iso8601Error
from isoctl.domain.isoweek import format_week, iso_week_date, parse_week
from isoctl.services.base import BaseService
from isoctl.services.result import ServiceResult


class WeekService(BaseService):
    """Converts between civil dates and ``YYYY-Www[-D]`` strings."""

    def format(self, day: date, include_weekday: bool | None = None) -> ServiceResult:
        """Render *day* as an ISO week string.

        When *include_weekday* is None the ``[week] include_weekday``
        setting decides between the long and short form.
        """
        if include_weekday is None:
            include_weekday = self._settings.week.include_weekday
        iso = iso_week_date(day)
        warnings: list[str] = []
        if iso.iso_year != day.year:
            warnings.append(f"{day.isoformat()} belongs to ISO year {iso.iso_year}")
        return ServiceResult.success(
            "format_week",
            {
                "text": format_week(day, include_weekday),
                "iso_year": iso.iso_year,
                "week": iso.week,
                "weekday": iso.weekday,
            },
            warnings,
        )

    def parse(self, text: str) -> ServiceResult:
        """Resolve an ISO week string to a civil date (Monday if no weekday)."""
        try:
            day = parse_week(text)
        except Iso8601Error as exc:
            return self._failure("parse_week", exc)
        iso = iso_week_date(day)
        return ServiceResult.success(
            "parse_week",
            {"date": day.isoformat(), "text": text},
            meta={"iso_year": iso.iso_year, "week": iso.week, "weekday": iso.weekday},
        )
