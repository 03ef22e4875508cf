"""CalendarService: weekday and ISO year-length lookups."""

from __future__ import annotations

from datetime import date

from isoctl.domain.errors import Iso8601Error, IsoRangeError
from isoctl.domain.isoweek import iso_year_weeks
from isoctl.domain.types import MAX_YEAR, MIN_YEAR
from isoctl.domain.weekday import iso_weekday, weekday, weekday_name
from isoctl.services.base import BaseService
from isoctl.services.result import ServiceResult


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        msg = f"year is out of range (valid range: {MIN_YEAR}-{MAX_YEAR} inclusive): {year}"
        raise IsoRangeError(msg, value=year)


def _check_date(year: int, month: int, day: int) -> None:
    try:
        date(year, month, day)
    except ValueError as exc:
        msg = f"not a calendar date: {year:04d}-{month:02d}-{day:02d} ({exc})"
        raise IsoRangeError(msg, value=f"{year}-{month}-{day}") from exc


class CalendarService(BaseService):
    """Day-of-week and 52/53-week decisions for civil dates."""

    def weekday(self, year: int, month: int, day: int) -> ServiceResult:
        """Day of week for a civil date (Monday=0)."""
        op = "weekday"
        try:
            _check_year(year)
            _check_date(year, month, day)
        except Iso8601Error as exc:
            return self._failure(op, exc)

        index = weekday(year, month, day)
        return ServiceResult.success(
            op,
            {
                "weekday": index,
                "iso_weekday": iso_weekday(year, month, day),
                "name": weekday_name(index),
            },
        )

    def year_weeks(self, year: int) -> ServiceResult:
        """Number of ISO weeks (52 or 53) in *year*."""
        op = "year_weeks"
        try:
            _check_year(year)
        except Iso8601Error as exc:
            return self._failure(op, exc)
        return ServiceResult.success(op, {"year": year, "weeks": iso_year_weeks(year)})
