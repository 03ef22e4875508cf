"""Value types and classification enums shared across the codecs."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

MIN_YEAR = 1
MAX_YEAR = 9999
MIN_WEEK = 1

# Longest text any codec will attempt to match.
MAX_INPUT_LENGTH = 64


class ErrorKind(StrEnum):
    """Classification of a rejected input."""

    FORMAT = "FORMAT_ERROR"
    RANGE = "RANGE_ERROR"
    NUMERIC = "NUMERIC_ERROR"


class IsoWeekDate(BaseModel):
    """A day named by ISO year, week number, and Monday-first weekday."""

    model_config = {"frozen": True}

    iso_year: int = Field(ge=MIN_YEAR, le=MAX_YEAR)
    week: int = Field(ge=MIN_WEEK, le=53)
    weekday: int = Field(default=1, ge=1, le=7)

    @model_validator(mode="after")
    def _week_fits_year(self) -> IsoWeekDate:
        from isoctl.domain.isoweek import iso_year_weeks

        if self.week > iso_year_weeks(self.iso_year):
            msg = f"ISO year {self.iso_year} has no week {self.week}"
            raise ValueError(msg)
        return self

    def __str__(self) -> str:
        return f"{self.iso_year:04d}-W{self.week:02d}-{self.weekday:1d}"
