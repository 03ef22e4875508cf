"""Day-of-week arithmetic (Zeller's congruence family).

Inputs are assumed calendar-valid; out-of-range months or days are the
caller's problem and produce an unspecified result rather than an error.
"""

from __future__ import annotations

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def weekday(year: int, month: int, day: int) -> int:
    """Day of week with Monday=0 ... Sunday=6.

    January and February count as months 13 and 14 of the previous year.
    The classical congruence yields Saturday=0; the final step rotates it
    to a Monday-first ordering.

    Examples:
        >>> weekday(2000, 1, 1)
        5
        >>> weekday(2020, 3, 1)
        6
    """
    if month < 3:
        month += 12
        year -= 1

    raw = (day + (13 * (month + 1)) // 5 + year + year // 4 - year // 100 + year // 400) % 7
    return (7 + (raw - 2)) % 7


def iso_weekday(year: int, month: int, day: int) -> int:
    """Day of week with Monday=1 ... Sunday=7."""
    return weekday(year, month, day) + 1


def weekday_name(index: int) -> str:
    """English name for a Monday=0 weekday index."""
    return WEEKDAY_NAMES[index % 7]
