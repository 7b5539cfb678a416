"""Report service - builds immutable report snapshots."""

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import datetime, timezone

from events.conf import EventOpsConfig
from events.domain import (
    AnalyticsSummary,
    Report,
    ReportId,
    ReportPeriod,
    ReportType,
)
from events.domain.errors import EventNotFoundError, ReportNotFoundError
from events.services.analytics import AnalyticsProvider
from events.services.event_service import parse_event_id, utc_now
from events.stores.interfaces import EventOpsStore

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ReportService:
    """Service for generating and looking up reports."""

    def __init__(
        self,
        store: EventOpsStore,
        analytics: AnalyticsProvider,
        config: EventOpsConfig | None = None,
        clock: Callable[[], datetime] = utc_now,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._store = store
        self._analytics = analytics
        self._config = config or EventOpsConfig()
        self._clock = clock
        self._lock = lock or threading.RLock()

    def generate_report(
        self, event_id: str, report_type: ReportType, created_by: str
    ) -> Report:
        """Snapshot the event, its stats and analytics into a new report.

        A report for an unknown event is still created with empty event and
        stats sections unless ``reports_require_event`` is set.

        Raises:
            EventNotFoundError: If the ID is malformed, or if the event is
                missing and ``reports_require_event`` is set.
        """
        parsed = parse_event_id(event_id)
        if parsed is None:
            raise EventNotFoundError(event_id)

        with self._lock:
            event = self._store.get_event(parsed)
            if event is None and self._config.reports_require_event:
                raise EventNotFoundError(event_id)
            stats = self._store.get_stats(parsed)
            analytics = self._analytics.get_analytics(parsed)

            now = self._clock()
            report = Report(
                id=ReportId.new(),
                event_id=parsed,
                report_type=report_type,
                generated_at=now,
                period=ReportPeriod(
                    start_date=event.created_at if event is not None else EPOCH,
                    end_date=now,
                ),
                event=event,
                stats=stats,
                analytics=AnalyticsSummary(
                    user_acquisition_rate=analytics.user_acquisition_rate,
                    repeat_customer_rate=analytics.repeat_customer_rate,
                    conversion_funnel=analytics.conversion_funnel,
                ),
                created_by=created_by,
            )
            self._store.add_report(report)
        if event is None:
            logger.warning("Generated %s report for unknown event %s", report_type.value, parsed)
        logger.info("Generated %s report %s for event %s", report_type.value, report.id, parsed)
        return report

    def get_report(self, report_id: str) -> Report:
        """Return a report by ID.

        Raises:
            ReportNotFoundError: If the report does not exist or the ID is malformed.
        """
        try:
            parsed = ReportId.from_string(report_id)
        except (TypeError, ValueError):
            raise ReportNotFoundError(report_id) from None
        report = self._store.get_report(parsed)
        if report is None:
            raise ReportNotFoundError(report_id)
        return report

    def list_event_reports(self, event_id: str) -> list[Report]:
        parsed = parse_event_id(event_id)
        if parsed is None:
            return []
        return self._store.list_reports_for_event(parsed)

    def list_reports(self) -> list[Report]:
        return self._store.list_reports()
