"""ISO week-numbering: year length, forward mapping, and inverse.

ISO week 1 is the week containing the year's first Thursday (equivalently,
the week containing January 4).  Near a year boundary a civil date can
belong to the previous or next ISO year; the Thursday rule decides this
without any special cases.

INVARIANT: ``week`` always lies in ``[1, iso_year_weeks(iso_year)]``.
"""

from __future__ import annotations

import re
from datetime import date, timedelta

from isoctl.domain.errors import IsoFormatError, IsoRangeError
from isoctl.domain.types import MAX_INPUT_LENGTH, MAX_YEAR, MIN_WEEK, MIN_YEAR, IsoWeekDate
from isoctl.domain.weekday import weekday

WEEK_PATTERN: re.Pattern[str] = re.compile(r"^(\d{4,})-W([0-5]\d)(?:-([1-7]))?$", re.ASCII)


def _p(year: int) -> int:
    return year + year // 4 - year // 100 + year // 400


def iso_year_weeks(year: int) -> int:
    """Number of ISO weeks (52 or 53) in *year*.

    A year has a leap week when January 1 is a Thursday, or when it is a
    Gregorian leap year starting on a Wednesday.  Both conditions reduce to
    the closed form below.

    Examples:
        >>> iso_year_weeks(2000)
        52
        >>> iso_year_weeks(2004)
        53
    """
    if _p(year) % 7 == 4 or _p(year - 1) % 7 == 3:
        return 53
    return 52


def _sunday_based(day: date) -> int:
    # Sunday=0 ... Saturday=6, independent of date.weekday()
    return (weekday(day.year, day.month, day.day) + 1) % 7


def iso_week_date(day: date) -> IsoWeekDate:
    """Map a civil date onto its ISO year, week, and weekday."""
    dow = ((7 + _sunday_based(day) - 1) % 7) + 1
    thursday = day + timedelta(days=4 - dow)
    day_of_year = thursday.timetuple().tm_yday
    return IsoWeekDate(
        iso_year=thursday.year,
        week=(day_of_year - 1) // 7 + 1,
        weekday=dow,
    )


def format_week(day: date, include_weekday: bool = True) -> str:
    """Render *day* as ``YYYY-Www-D`` (long form) or ``YYYY-Www`` (short form)."""
    iso = iso_week_date(day)
    if not include_weekday:
        return f"{iso.iso_year:04d}-W{iso.week:02d}"
    return f"{iso.iso_year:04d}-W{iso.week:02d}-{iso.weekday:1d}"


def parse_week(text: str) -> date:
    """Resolve an ISO week string to a civil date.

    The short form (no weekday) resolves to the Monday of that week.

    Raises:
        IsoFormatError: *text* is not ``YYYY-Www`` or ``YYYY-Www-D`` (the year
            may run past four digits so that it can be range-checked).
        IsoRangeError: the year is outside 1-9999, the week does not exist in
            that ISO year, or the resulting day cannot be represented.
    """
    match = WEEK_PATTERN.fullmatch(text) if len(text) <= MAX_INPUT_LENGTH else None
    if match is None:
        msg = f"ISO week string is of incorrect format: {text!r}"
        raise IsoFormatError(msg, value=text)

    year = int(match.group(1))
    if year < MIN_YEAR or year > MAX_YEAR:
        msg = f"year is out of range (valid range: {MIN_YEAR}-{MAX_YEAR} inclusive): {year}"
        raise IsoRangeError(msg, value=text)

    week = int(match.group(2))
    weeks = iso_year_weeks(year)
    if week < MIN_WEEK or week > weeks:
        msg = f"week is out of range (valid range: {MIN_WEEK}-{weeks} for {year}): {week}"
        raise IsoRangeError(msg, value=text)

    dow = int(match.group(3)) if match.group(3) else 1

    # January 4 always falls in ISO week 1
    days_to_add = (week - 1) * 7 + (dow - 1) - weekday(year, 1, 4)
    try:
        return date(year, 1, 4) + timedelta(days=days_to_add)
    except OverflowError as exc:
        msg = f"{text} falls outside the representable calendar"
        raise IsoRangeError(msg, value=text) from exc
