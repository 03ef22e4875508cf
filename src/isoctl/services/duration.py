"""DurationService: ISO 8601 duration parsing and formatting."""

from __future__ import annotations

from datetime import datetime, timedelta

from isoctl.domain.duration import (
    discarded_components,
    format_duration,
    parse_duration,
    truncate_to_millis,
)
from isoctl.domain.errors import Iso8601Error, IsoFormatError
from isoctl.services.base import BaseService
from isoctl.services.result import ServiceResult


def _rendered(value: timedelta) -> dict[str, object]:
    return {
        "text": format_duration(value),
        "total_seconds": truncate_to_millis(value).total_seconds(),
    }


class DurationService(BaseService):
    """Converts between ``timedelta`` values and ``P...T...`` strings."""

    def parse(self, text: str, strict: bool | None = None) -> ServiceResult:
        """Parse an ISO 8601 duration.

        When *strict* is None the ``[duration] strict`` setting applies.
        In the compatible grammar, non-zero years and months are discarded
        and reported as warnings.
        """
        if strict is None:
            strict = self._settings.duration.strict
        try:
            value = parse_duration(text, strict=strict)
        except Iso8601Error as exc:
            return self._failure("parse_duration", exc)

        dropped = [] if strict else discarded_components(text)
        return ServiceResult.success(
            "parse_duration",
            {
                "text": text,
                "total_seconds": value.total_seconds(),
                "canonical": format_duration(value),
            },
            [f"{name} component ignored: calendar {name} have no fixed length" for name in dropped],
        )

    def format(self, value: timedelta) -> ServiceResult:
        """Render *value* as ``PT...``, truncated to milliseconds."""
        return ServiceResult.success("format_duration", _rendered(value))

    def between(self, start: datetime, end: datetime) -> ServiceResult:
        """Elapsed time from *start* to *end* as an ISO duration."""
        try:
            elapsed = end - start
        except TypeError:
            exc = IsoFormatError(
                "cannot mix timestamps with and without a UTC offset",
                value=f"{start.isoformat()}/{end.isoformat()}",
            )
            return self._failure("duration_between", exc)
        return ServiceResult.success("duration_between", _rendered(elapsed))
