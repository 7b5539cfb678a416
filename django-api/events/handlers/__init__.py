from events.handlers.views import (
    AdminEventListView,
    EventAnalyticsView,
    EventDetailView,
    EventListView,
    EventReportListView,
    EventStatsView,
    EventStatusView,
    HealthView,
    ReportDetailView,
    ReportListView,
    TicketSaleView,
)

__all__ = [
    "AdminEventListView",
    "EventAnalyticsView",
    "EventDetailView",
    "EventListView",
    "EventReportListView",
    "EventStatsView",
    "EventStatusView",
    "HealthView",
    "ReportDetailView",
    "ReportListView",
    "TicketSaleView",
]
