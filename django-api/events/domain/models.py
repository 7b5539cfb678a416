"""Domain models representing stored state.

These are pure domain objects with no API input rules. Records are frozen;
services build a replacement with ``dataclasses.replace`` and hand it back
to the store, so callers only ever hold snapshots.
"""

from dataclasses import dataclass, field
from datetime import datetime

from events.domain.value_objects import (
    Capacity,
    EventId,
    EventStatus,
    Money,
    ReportId,
    ReportType,
)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event owned by one admin."""

    id: EventId
    name: str
    description: str
    event_date: datetime
    location: str
    total_capacity: Capacity
    admin_id: str
    created_at: datetime
    updated_at: datetime
    tickets_issued: int = 0
    tickets_sold: int = 0
    revenue: Money = field(default_factory=Money.zero)
    status: EventStatus = EventStatus.DRAFT


@dataclass(frozen=True)
class EventPatch:
    """Fields an admin may overwrite on an existing event.

    ``None`` means "leave unchanged".
    """

    name: str | None = None
    description: str | None = None
    event_date: datetime | None = None
    location: str | None = None
    total_capacity: Capacity | None = None

    def changes(self) -> dict:
        return {
            name: value
            for name, value in self.__dict__.items()
            if value is not None
        }


@dataclass(frozen=True)
class EventStats:
    """Aggregate figures derived from one event."""

    event_id: EventId
    created_at: datetime
    updated_at: datetime
    total_tickets: int = 0
    tickets_sold: int = 0
    tickets_used: int = 0
    total_revenue: Money = field(default_factory=Money.zero)
    average_ticket_price: str = "0"
    attendance_rate: float = 0.0
    sellout_rate: float = 0.0


@dataclass(frozen=True)
class ConversionFunnel:
    page_views: int
    add_to_cart: int
    checkout_initiated: int
    completed: int


@dataclass(frozen=True)
class TicketTypeCount:
    type: str
    count: int


@dataclass(frozen=True)
class Analytics:
    """Dashboard snapshot for an event."""

    event_id: EventId
    conversion_funnel: ConversionFunnel
    hourly_revenue: dict[int, Money] = field(default_factory=dict)
    user_acquisition_rate: float = 0.0
    repeat_customer_rate: float = 0.0
    top_ticket_types: tuple[TicketTypeCount, ...] = ()
    geographic_distribution: dict[str, int] | None = None
    device_types: dict[str, int] | None = None


@dataclass(frozen=True)
class AnalyticsSummary:
    """The analytics fields copied into a report."""

    user_acquisition_rate: float
    repeat_customer_rate: float
    conversion_funnel: ConversionFunnel


@dataclass(frozen=True)
class ReportPeriod:
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class Report:
    """Point-in-time snapshot of an event, its stats and analytics."""

    id: ReportId
    event_id: EventId
    report_type: ReportType
    generated_at: datetime
    period: ReportPeriod
    event: Event | None
    stats: EventStats | None
    analytics: AnalyticsSummary
    created_by: str
