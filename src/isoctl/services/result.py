"""Outcome types returned by every service method.

INVARIANT: a ServiceResult with ``ok=False`` has an ``error`` and an empty
``data``; callers never receive a partial value next to an error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    """Why an input was rejected.

    ``code`` is an ``ErrorKind`` value (``FORMAT_ERROR``, ``RANGE_ERROR``,
    ``NUMERIC_ERROR``); ``detail["input"]`` holds the rejected input.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Either an accepted value (``data``) or a classified rejection (``error``).

    Attributes:
        ok: Whether the input was accepted.
        op: Operation name, e.g. ``"parse_week"``.
        data: Operation-specific fields; empty when ``ok`` is False.
        warnings: Lossy or surprising conversions that still succeeded.
        error: The rejection when ``ok`` is False.
        meta: Derived details shown only in verbose output.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _no_data_on_failure(self) -> ServiceResult:
        if not self.ok and self.data:
            msg = f"failed {self.op} result must not carry data"
            raise ValueError(msg)
        return self

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any],
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [], meta=meta)

    @classmethod
    def failure(cls, op: str, error: ServiceError) -> ServiceResult:
        return cls(ok=False, op=op, error=error)
