from events.services.analytics import AnalyticsProvider, PlaceholderAnalyticsProvider
from events.services.event_service import EventService
from events.services.report_service import ReportService

__all__ = [
    "AnalyticsProvider",
    "PlaceholderAnalyticsProvider",
    "EventService",
    "ReportService",
]
