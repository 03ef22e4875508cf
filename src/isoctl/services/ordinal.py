"""OrdinalService: ``YYYY-DDD`` formatting and parsing."""

from __future__ import annotations

from datetime import date

from isoctl.domain.errors import Iso8601Error
from isoctl.domain.ordinal import day_of_year, format_ordinal, parse_ordinal
from isoctl.services.base import BaseService
from isoctl.services.result import ServiceResult


class OrdinalService(BaseService):
    def format(self, day: date) -> ServiceResult:
        data = {"text": format_ordinal(day), "year": day.year, "day_of_year": day_of_year(day)}
        return ServiceResult.success("format_ordinal", data)

    def parse(self, text: str) -> ServiceResult:
        try:
            day = parse_ordinal(text)
        except Iso8601Error as exc:
            return self._failure("parse_ordinal", exc)
        return ServiceResult.success("parse_ordinal", {"date": day.isoformat(), "text": text})
