"""ISO 8601 duration codec against :class:`datetime.timedelta`.

Two grammars are supported:

- Compatible (default): ``P[nY][nM][nD]T[nH][nM][n[.f]S]``.  The ``T`` is
  mandatory even with no time fields, and years/months are matched but
  contribute nothing, because a calendar year or month has no fixed length
  in elapsed seconds.
- Strict: ``P[nY][nM][nW][nD][T[nH][nM][n[.f]S]]`` as ISO 8601 writes it.
  At least one component is required, ``T`` must be followed by a time
  component, and non-zero years/months are rejected instead of dropped.

Formatting only ever emits the time designator portion (``PT...``); large
magnitudes grow the hours field rather than adding day designators.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

from isoctl.domain.errors import IsoFormatError, IsoNumericError, IsoRangeError
from isoctl.domain.types import MAX_INPUT_LENGTH

_SECONDS = r"(?:(?P<seconds>\d+(?:[.,]\d+)?)S)?"

COMPAT_PATTERN: re.Pattern[str] = re.compile(
    r"^P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<days>\d+)D)?"
    r"T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?" + _SECONDS + r"$",
    re.ASCII,
)

STRICT_PATTERN: re.Pattern[str] = re.compile(
    r"^P(?!$)(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?"
    r"(?:T(?=\d)(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?" + _SECONDS + r")?$",
    re.ASCII,
)

_MILLISECOND = timedelta(milliseconds=1)
_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000


def _int_field(groups: dict[str, str | None], name: str, text: str) -> int:
    raw = groups.get(name)
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} component cannot be represented: {raw!r}"
        raise IsoNumericError(msg, value=text) from exc


def _seconds_field(raw: str | None, text: str) -> tuple[int, int]:
    """Split the seconds token into whole seconds and truncated microseconds."""
    if not raw:
        return 0, 0
    try:
        value = Decimal(raw.replace(",", "."))
    except InvalidOperation as exc:
        msg = f"seconds component cannot be represented: {raw!r}"
        raise IsoNumericError(msg, value=text) from exc
    whole = int(value)
    micros = int((value - whole) * 1_000_000)
    return whole, micros


def parse_duration(text: str, *, strict: bool = False) -> timedelta:
    """Decompose an ISO 8601 duration string into a :class:`timedelta`.

    Only days, hours, minutes, and seconds contribute to the magnitude.
    Fractional seconds finer than a microsecond are truncated.

    Raises:
        IsoFormatError: *text* does not match the selected grammar.
        IsoRangeError: strict mode and a non-zero year or month component.
        IsoNumericError: a component overflows the timedelta range.

    Examples:
        >>> parse_duration("P1DT1H")
        datetime.timedelta(days=1, seconds=3600)
    """
    pattern = STRICT_PATTERN if strict else COMPAT_PATTERN
    match = pattern.fullmatch(text) if len(text) <= MAX_INPUT_LENGTH else None
    if match is None:
        msg = f"duration string is of incorrect format: {text!r}"
        raise IsoFormatError(msg, value=text)

    groups = match.groupdict()
    if strict:
        for name in ("years", "months"):
            if _int_field(groups, name, text):
                msg = f"{name} have no fixed length and cannot form an elapsed duration"
                raise IsoRangeError(msg, value=text)

    weeks = _int_field(groups, "weeks", text)
    days = _int_field(groups, "days", text)
    hours = _int_field(groups, "hours", text)
    minutes = _int_field(groups, "minutes", text)
    seconds, micros = _seconds_field(groups.get("seconds"), text)

    try:
        return timedelta(
            weeks=weeks,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            microseconds=micros,
        )
    except OverflowError as exc:
        msg = f"duration exceeds the representable range: {text!r}"
        raise IsoNumericError(msg, value=text) from exc


def truncate_to_millis(value: timedelta) -> timedelta:
    """Drop sub-millisecond precision, rounding toward zero."""
    micros = value // timedelta(microseconds=1)
    millis = abs(micros) // 1000
    return _MILLISECOND * (millis if micros >= 0 else -millis)


def format_duration(value: timedelta) -> str:
    """Render *value* as an upper-case ``PT{h}H{m}M{s}S`` string.

    Leading zero hours (and zero minutes when there are no hours) are
    omitted, and fractional seconds keep only significant millisecond
    digits.

    Examples:
        >>> format_duration(timedelta(hours=24))
        'PT24H0M0S'
        >>> format_duration(timedelta(seconds=90))
        'PT1M30S'
    """
    millis = truncate_to_millis(value) // _MILLISECOND
    sign = "-" if millis < 0 else ""
    millis = abs(millis)

    hours, rest = divmod(millis, _MS_PER_HOUR)
    minutes, rest = divmod(rest, _MS_PER_MINUTE)
    seconds, fraction = divmod(rest, 1000)

    text = str(seconds)
    if fraction:
        text += "." + f"{fraction:03d}".rstrip("0")
    text += "S"
    if hours or minutes:
        text = f"{minutes}M" + text
    if hours:
        text = f"{hours}H" + text
    return "PT" + sign + text


def discarded_components(text: str) -> list[str]:
    """Names of non-zero year/month components the compatible grammar drops."""
    match = COMPAT_PATTERN.fullmatch(text) if len(text) <= MAX_INPUT_LENGTH else None
    if match is None:
        return []
    return [name for name in ("years", "months") if int(match.group(name) or 0)]
