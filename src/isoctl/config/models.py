"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, isoctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class WeekConfig(BaseModel):
    """[week] section."""

    model_config = {"frozen": True}

    include_weekday: bool = True


class DurationConfig(BaseModel):
    """[duration] section.

    ``strict`` selects the ISO 8601 grammar that rejects year/month
    components instead of silently discarding them.
    """

    model_config = {"frozen": True}

    strict: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)

