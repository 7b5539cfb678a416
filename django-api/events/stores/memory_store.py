"""Process-memory implementation of the EventOpsStore.

Nothing survives a restart. Callers serialize mutations themselves.
"""

from events.domain import Analytics, Event, EventId, EventStats, Report, ReportId
from events.stores.interfaces import EventOpsStore


class InMemoryEventOpsStore(EventOpsStore):
    """Dict- and list-backed event store."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}
        self._stats: dict[EventId, EventStats] = {}
        self._analytics: dict[EventId, Analytics] = {}
        self._reports: list[Report] = []

    def add_event(self, event: Event) -> None:
        self._events[event.id] = event

    def save_event(self, event: Event) -> None:
        if event.id not in self._events:
            raise KeyError(f"Unknown event {event.id}")
        self._events[event.id] = event

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def list_events_for_admin(self, admin_id: str) -> list[Event]:
        return [e for e in self._events.values() if e.admin_id == admin_id]

    def save_stats(self, stats: EventStats) -> None:
        self._stats[stats.event_id] = stats

    def get_stats(self, event_id: EventId) -> EventStats | None:
        return self._stats.get(event_id)

    def save_analytics(self, analytics: Analytics) -> None:
        self._analytics[analytics.event_id] = analytics

    def get_analytics(self, event_id: EventId) -> Analytics | None:
        return self._analytics.get(event_id)

    def add_report(self, report: Report) -> None:
        self._reports.append(report)

    def get_report(self, report_id: ReportId) -> Report | None:
        return next((r for r in self._reports if r.id == report_id), None)

    def list_reports(self) -> list[Report]:
        return list(self._reports)

    def list_reports_for_event(self, event_id: EventId) -> list[Report]:
        return [r for r in self._reports if r.event_id == event_id]
