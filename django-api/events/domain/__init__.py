from events.domain.models import (
    Analytics,
    AnalyticsSummary,
    ConversionFunnel,
    Event,
    EventPatch,
    EventStats,
    Report,
    ReportPeriod,
    TicketTypeCount,
)
from events.domain.value_objects import (
    Capacity,
    EventId,
    EventStatus,
    Money,
    ReportId,
    ReportType,
)

__all__ = [
    "Analytics",
    "AnalyticsSummary",
    "ConversionFunnel",
    "Event",
    "EventPatch",
    "EventStats",
    "Report",
    "ReportPeriod",
    "TicketTypeCount",
    "Capacity",
    "EventId",
    "EventStatus",
    "Money",
    "ReportId",
    "ReportType",
]
