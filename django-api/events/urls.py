from django.urls import path

from events.handlers import (
    AdminEventListView,
    EventAnalyticsView,
    EventDetailView,
    EventListView,
    EventReportListView,
    EventStatsView,
    EventStatusView,
    ReportDetailView,
    ReportListView,
    TicketSaleView,
)

# Literal segments (admin/, reports) must come before events/<event_id>.
urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/admin/<str:admin_id>", AdminEventListView.as_view(), name="admin-event-list"),
    path("events/reports", ReportListView.as_view(), name="report-list"),
    path("events/reports/<str:report_id>", ReportDetailView.as_view(), name="report-detail"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/status", EventStatusView.as_view(), name="event-status"),
    path("events/<str:event_id>/ticket-sale", TicketSaleView.as_view(), name="ticket-sale"),
    path("events/<str:event_id>/stats", EventStatsView.as_view(), name="event-stats"),
    path("events/<str:event_id>/analytics", EventAnalyticsView.as_view(), name="event-analytics"),
    path(
        "events/<str:event_id>/reports",
        EventReportListView.as_view(),
        name="event-report-list",
    ),
]
