"""Service layer: public operations returning ServiceResult.

Services may import from the domain layer.
They must never import from commands or output.
"""

from isoctl.services.calendar import CalendarService
from isoctl.services.duration import DurationService
from isoctl.services.layout import LayoutService
from isoctl.services.ordinal import OrdinalService
from isoctl.services.result import ServiceError, ServiceResult
from isoctl.services.week import WeekService

__all__ = [
    "CalendarService",
    "DurationService",
    "LayoutService",
    "OrdinalService",
    "ServiceError",
    "ServiceResult",
    "WeekService",
]
