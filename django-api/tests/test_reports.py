"""Unit tests for the analytics provider and ReportService.

Run with: pytest tests/test_reports.py -v
"""

from datetime import datetime, timezone

import pytest

from events.conf import EventOpsConfig
from events.domain import ConversionFunnel, EventId, ReportType
from events.domain.errors import EventNotFoundError, ReportNotFoundError
from events.services import PlaceholderAnalyticsProvider, ReportService

UNKNOWN_ID = "00000000-0000-4000-8000-000000000000"


class RecordingLock:
    """Lock stand-in that records whether a store write happened while held."""

    def __init__(self) -> None:
        self.entered = 0
        self.held = False
        self.held_during_save = False

    def __enter__(self):
        self.entered += 1
        self.held = True
        return self

    def __exit__(self, *exc_info):
        self.held = False
        return False


class TestPlaceholderAnalyticsProvider:
    """Tests for PlaceholderAnalyticsProvider."""

    def test_first_access_creates_fixed_funnel(self, analytics_provider, store):
        event_id = EventId.new()
        analytics = analytics_provider.get_analytics(event_id)
        assert analytics.event_id == event_id
        assert analytics.conversion_funnel == ConversionFunnel(
            page_views=1000, add_to_cart=300, checkout_initiated=150, completed=100
        )
        assert analytics.hourly_revenue == {}
        assert analytics.user_acquisition_rate == 0
        assert analytics.repeat_customer_rate == 0
        assert analytics.top_ticket_types == ()
        assert analytics.geographic_distribution is None
        assert analytics.device_types is None
        assert store.get_analytics(event_id) == analytics

    def test_second_access_returns_stored_snapshot(self, analytics_provider):
        event_id = EventId.new()
        first = analytics_provider.get_analytics(event_id)
        assert analytics_provider.get_analytics(event_id) is first

    def test_initialization_holds_the_shared_lock(self, store, monkeypatch):
        """The check-then-insert runs inside the lock passed in."""
        lock = RecordingLock()
        save = store.save_analytics

        def recording_save(analytics):
            lock.held_during_save = lock.held
            save(analytics)

        monkeypatch.setattr(store, "save_analytics", recording_save)
        provider = PlaceholderAnalyticsProvider(store, lock=lock)
        provider.get_analytics(EventId.new())
        assert lock.entered == 1
        assert lock.held_during_save

    def test_funnel_ignores_ticket_sales(self, make_event, event_service, analytics_provider):
        event = make_event()
        event_service.record_ticket_sale(str(event.id), "50")
        analytics = analytics_provider.get_analytics(event.id)
        assert analytics.conversion_funnel.completed == 100


class TestGenerateReport:
    """Tests for ReportService.generate_report."""

    def test_report_embeds_event_stats_and_analytics(self, make_event, report_service, clock):
        event = make_event()
        clock.advance(hours=1)
        report = report_service.generate_report(str(event.id), ReportType.SALES, "admin-123")
        assert report.event_id == event.id
        assert report.report_type == ReportType.SALES
        assert report.created_by == "admin-123"
        assert report.event == event
        assert report.stats is not None
        assert report.stats.event_id == event.id
        assert report.analytics.conversion_funnel.page_views == 1000
        assert report.generated_at == clock.now
        assert report.period.start_date == event.created_at
        assert report.period.end_date == report.generated_at

    def test_report_uses_current_state(self, make_event, event_service, report_service):
        """Mutations made just before generation are in the snapshot."""
        event = make_event()
        event_service.record_ticket_sale(str(event.id), "75")
        report = report_service.generate_report(str(event.id), ReportType.REVENUE, "admin-123")
        assert report.event.tickets_sold == 1
        assert str(report.event.revenue) == "75"
        assert report.stats.tickets_sold == 1
        assert report.stats.average_ticket_price == "75.00"

    def test_report_is_not_changed_by_later_sales(self, make_event, event_service, report_service):
        event = make_event()
        report = report_service.generate_report(str(event.id), ReportType.SALES, "admin-123")
        event_service.record_ticket_sale(str(event.id), "75")
        stored = report_service.get_report(str(report.id))
        assert stored.event.tickets_sold == 0
        assert stored.stats.tickets_sold == 0

    def test_report_for_unknown_event_is_partially_empty(self, report_service):
        report = report_service.generate_report(UNKNOWN_ID, ReportType.SALES, "admin-123")
        assert report.event is None
        assert report.stats is None
        assert report.period.start_date == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert report.analytics.conversion_funnel.completed == 100

    def test_report_for_unknown_event_rejected_when_required(
        self, store, analytics_provider, clock
    ):
        service = ReportService(
            store,
            analytics_provider,
            config=EventOpsConfig(reports_require_event=True),
            clock=clock,
        )
        with pytest.raises(EventNotFoundError):
            service.generate_report(UNKNOWN_ID, ReportType.SALES, "admin-123")
        assert service.list_reports() == []

    def test_report_for_malformed_id_raises(self, report_service):
        with pytest.raises(EventNotFoundError):
            report_service.generate_report("non-existent", ReportType.SALES, "admin-123")


class TestReportLookups:
    """Tests for report lookups."""

    def test_list_event_reports_in_creation_order(self, make_event, report_service):
        event = make_event()
        other = make_event(name="Other")
        sales = report_service.generate_report(str(event.id), ReportType.SALES, "a")
        report_service.generate_report(str(other.id), ReportType.SALES, "a")
        attendance = report_service.generate_report(str(event.id), ReportType.ATTENDANCE, "a")
        assert report_service.list_event_reports(str(event.id)) == [sales, attendance]

    def test_list_event_reports_unknown_event_is_empty(self, report_service):
        assert report_service.list_event_reports(UNKNOWN_ID) == []
        assert report_service.list_event_reports("non-existent") == []

    def test_get_report_by_id(self, make_event, report_service):
        event = make_event()
        report = report_service.generate_report(str(event.id), ReportType.SALES, "a")
        assert report_service.get_report(str(report.id)) == report

    def test_get_report_unknown_raises(self, report_service):
        with pytest.raises(ReportNotFoundError):
            report_service.get_report(UNKNOWN_ID)
        with pytest.raises(ReportNotFoundError):
            report_service.get_report("non-existent")

    def test_list_reports_returns_all(self, make_event, report_service):
        first = make_event()
        second = make_event()
        report_service.generate_report(str(first.id), ReportType.SALES, "a")
        report_service.generate_report(str(second.id), ReportType.PERFORMANCE, "a")
        assert len(report_service.list_reports()) == 2
