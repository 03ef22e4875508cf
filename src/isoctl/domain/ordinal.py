"""Ordinal dates: ``YYYY-DDD`` where DDD is the 1-based day of the year."""

from __future__ import annotations

import calendar
import re
from datetime import date, timedelta

from isoctl.domain.errors import IsoFormatError, IsoRangeError
from isoctl.domain.types import MAX_INPUT_LENGTH, MAX_YEAR, MIN_YEAR

ORDINAL_PATTERN: re.Pattern[str] = re.compile(r"^(\d{4,})-(\d{3})$", re.ASCII)


def year_days(year: int) -> int:
    """365, or 366 in a Gregorian leap year."""
    return 366 if calendar.isleap(year) else 365


def day_of_year(day: date) -> int:
    return day.timetuple().tm_yday


def format_ordinal(day: date) -> str:
    """Render *day* as ``YYYY-DDD``."""
    return f"{day.year:04d}-{day_of_year(day):03d}"


def parse_ordinal(text: str) -> date:
    """Resolve ``YYYY-DDD`` to a civil date.

    Raises:
        IsoFormatError: *text* is not a year of four or more digits, a dash,
            and three digits.
        IsoRangeError: the year is outside 1-9999 or the day does not exist
            in that year.
    """
    match = ORDINAL_PATTERN.fullmatch(text) if len(text) <= MAX_INPUT_LENGTH else None
    if match is None:
        msg = f"ordinal date string is of incorrect format: {text!r}"
        raise IsoFormatError(msg, value=text)

    year = int(match.group(1))
    if year < MIN_YEAR or year > MAX_YEAR:
        msg = f"year is out of range (valid range: {MIN_YEAR}-{MAX_YEAR} inclusive): {year}"
        raise IsoRangeError(msg, value=text)

    ordinal = int(match.group(2))
    last = year_days(year)
    if ordinal < 1 or ordinal > last:
        msg = f"day of year is out of range (valid range: 1-{last} for {year}): {ordinal}"
        raise IsoRangeError(msg, value=text)

    return date(year, 1, 1) + timedelta(days=ordinal - 1)
