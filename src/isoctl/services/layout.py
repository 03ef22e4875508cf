"""LayoutService: re-render a timestamp from one named layout into another."""

from __future__ import annotations

from isoctl.domain.errors import Iso8601Error
from isoctl.domain.layouts import Layout, format_datetime, parse_datetime
from isoctl.services.base import BaseService
from isoctl.services.result import ServiceResult


class LayoutService(BaseService):
    def reformat(self, text: str, source: Layout, target: Layout) -> ServiceResult:
        """Parse *text* with *source* and render it with *target*."""
        try:
            value = parse_datetime(text, source)
        except Iso8601Error as exc:
            return self._failure("reformat_datetime", exc)
        return ServiceResult.success(
            "reformat_datetime",
            {"text": format_datetime(value, target), "layout": target.name},
        )
