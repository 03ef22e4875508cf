"""Classified codec failures.

Every rejection raised by the domain layer is an :class:`Iso8601Error`
carrying its :class:`ErrorKind` and the offending input.  The service layer
turns these into failed ``ServiceResult`` values; nothing above the domain
sees them as exceptions.
"""

from __future__ import annotations

from typing import Any

from isoctl.domain.types import ErrorKind


class Iso8601Error(ValueError):
    """Base class for every rejected ISO 8601 input."""

    kind: ErrorKind = ErrorKind.FORMAT

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class IsoFormatError(Iso8601Error):
    """Input does not match the required textual pattern."""

    kind = ErrorKind.FORMAT


class IsoRangeError(Iso8601Error):
    """Input is well-formed but a value is out of bounds."""

    kind = ErrorKind.RANGE


class IsoNumericError(Iso8601Error):
    """A numeric component cannot be represented."""

    kind = ErrorKind.NUMERIC
