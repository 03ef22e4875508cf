"""BaseService: shared construction and failure classification.

Every service is built from :class:`IsoSettings` (or defaults) so that
config-driven behaviour such as strict duration parsing or the default
week form applies uniformly to the CLI and library callers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isoctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from isoctl.config.settings import IsoSettings
    from isoctl.domain.errors import Iso8601Error

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class WeekService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                try:
                    day = parse_week(text)
                except Iso8601Error as exc:
                    return self._failure("parse_week", exc)
                ...
    """

    def __init__(self, settings: IsoSettings | None = None) -> None:
        if settings is None:
            from isoctl.config.settings import IsoSettings

            settings = IsoSettings()
        self._settings = settings

    @property
    def settings(self) -> IsoSettings:
        return self._settings

    def _failure(self, op: str, exc: Iso8601Error) -> ServiceResult:
        """Convert a domain rejection into a failed ServiceResult."""
        logger.debug("%s rejected %r: %s", op, exc.value, exc.message)
        detail = {"input": exc.value} if exc.value is not None else {}
        error = ServiceError(code=exc.kind.value, message=exc.message, detail=detail)
        return ServiceResult.failure(op, error)
