"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Misses are reported as
``None`` or an empty list, never as exceptions.
"""

from abc import ABC, abstractmethod

from events.domain import Analytics, Event, EventId, EventStats, Report, ReportId


class EventOpsStore(ABC):
    """Interface for event, stats, analytics and report persistence."""

    @abstractmethod
    def add_event(self, event: Event) -> None:
        """Store a new event."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> None:
        """Replace the stored event that has the same ID."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def list_events_for_admin(self, admin_id: str) -> list[Event]:
        """Return events owned by an admin, in insertion order."""
        ...

    @abstractmethod
    def save_stats(self, stats: EventStats) -> None:
        """Insert or replace the stats record for an event."""
        ...

    @abstractmethod
    def get_stats(self, event_id: EventId) -> EventStats | None:
        """Return stats for an event, or None if not found."""
        ...

    @abstractmethod
    def save_analytics(self, analytics: Analytics) -> None:
        """Insert or replace the analytics snapshot for an event."""
        ...

    @abstractmethod
    def get_analytics(self, event_id: EventId) -> Analytics | None:
        """Return the analytics snapshot for an event, or None."""
        ...

    @abstractmethod
    def add_report(self, report: Report) -> None:
        """Append a report."""
        ...

    @abstractmethod
    def get_report(self, report_id: ReportId) -> Report | None:
        """Return a report by ID, or None if not found."""
        ...

    @abstractmethod
    def list_reports(self) -> list[Report]:
        """Return all reports in creation order."""
        ...

    @abstractmethod
    def list_reports_for_event(self, event_id: EventId) -> list[Report]:
        """Return reports for an event in creation order."""
        ...
