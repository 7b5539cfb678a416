"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from events.conf import EventOpsConfig
from events.domain import (
    Capacity,
    Event,
    EventId,
    EventPatch,
    EventStats,
    EventStatus,
    Money,
)
from events.domain.errors import (
    CapacityExceededError,
    EventNotFoundError,
    InvalidStatusTransitionError,
    StatsNotFoundError,
)
from events.services.stats import compute_stats, empty_stats
from events.stores.interfaces import EventOpsStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_event_id(event_id: str) -> EventId | None:
    """Return the EventId for ``event_id``, or None if it is malformed."""
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError):
        return None


class EventService:
    """Service for event lifecycle, ticket sales and statistics."""

    def __init__(
        self,
        store: EventOpsStore,
        config: EventOpsConfig | None = None,
        clock: Clock = utc_now,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._store = store
        self._config = config or EventOpsConfig()
        self._clock = clock
        # An event and its stats change together; one lock covers the store.
        self._lock = lock or threading.RLock()

    def create_event(
        self,
        name: str,
        description: str,
        event_date: datetime,
        location: str,
        total_capacity: int,
        admin_id: str,
    ) -> Event:
        """Create a draft event and its zeroed stats record.

        Raises:
            ValueError: If total_capacity is not positive.
        """
        now = self._clock()
        event = Event(
            id=EventId.new(),
            name=name,
            description=description,
            event_date=event_date,
            location=location,
            total_capacity=Capacity(total_capacity),
            admin_id=admin_id,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._store.add_event(event)
            self._store.save_stats(empty_stats(event, now))
        logger.info("Created event %s for admin %s", event.id, admin_id)
        return event

    def find_event(self, event_id: str) -> Event | None:
        """Return an event by ID, or None if it does not exist."""
        parsed = parse_event_id(event_id)
        if parsed is None:
            return None
        return self._store.get_event(parsed)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist or the ID is malformed.
        """
        event = self.find_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def list_events(self) -> list[Event]:
        return self._store.list_events()

    def list_admin_events(self, admin_id: str) -> list[Event]:
        return self._store.list_events_for_admin(admin_id)

    def update_event(self, event_id: str, patch: EventPatch) -> Event:
        """Overwrite the fields set on ``patch``.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        with self._lock:
            event = self.get_event(event_id)
            updated = self._touch(replace(event, **patch.changes()))
            # Capacity feeds totalTickets and selloutRate.
            stats = self._build_stats(updated) if patch.total_capacity is not None else None
            self._store.save_event(updated)
            if stats is not None:
                self._store.save_stats(stats)
        return updated

    def update_status(self, event_id: str, status: EventStatus) -> Event:
        """Move an event to ``status``.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidStatusTransitionError: If transitions are enforced and the
                move is not in the transition table.
        """
        with self._lock:
            event = self.get_event(event_id)
            if self._config.enforce_status_transitions and not event.status.can_transition_to(status):
                logger.warning(
                    "Rejected status change %s -> %s for event %s",
                    event.status.value,
                    status.value,
                    event.id,
                )
                raise InvalidStatusTransitionError(event.status.value, status.value)
            updated = self._touch(replace(event, status=status))
            self._store.save_event(updated)
        logger.info(
            "Event %s status %s -> %s", event.id, event.status.value, status.value
        )
        return updated

    def record_ticket_sale(self, event_id: str, amount: str | int | float) -> Event:
        """Record one sold ticket for ``amount`` and refresh the stats.

        Raises:
            InvalidAmountError: If amount is not a non-negative decimal.
            EventNotFoundError: If the event does not exist.
            CapacityExceededError: If oversell is disabled and the event is full.
        """
        price = Money.parse(amount)
        with self._lock:
            event = self.get_event(event_id)
            capacity = event.total_capacity.value
            if not self._config.allow_oversell and event.tickets_sold >= capacity:
                logger.warning("Rejected sale for sold-out event %s", event.id)
                raise CapacityExceededError(event_id, capacity)
            updated = self._touch(
                replace(
                    event,
                    tickets_sold=event.tickets_sold + 1,
                    revenue=event.revenue + price,
                )
            )
            stats = self._build_stats(updated)
            self._store.save_event(updated)
            self._store.save_stats(stats)
        logger.info("Recorded ticket sale of %s for event %s", price, event.id)
        return updated

    def get_stats(self, event_id: str) -> EventStats:
        """Return the stats for an event.

        Raises:
            StatsNotFoundError: If no stats exist for the event.
        """
        parsed = parse_event_id(event_id)
        stats = self._store.get_stats(parsed) if parsed is not None else None
        if stats is None:
            raise StatsNotFoundError(event_id)
        return stats

    def refresh_stats(self, event_id: str) -> EventStats:
        """Rebuild the stats for an event from its current state.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        with self._lock:
            stats = self._build_stats(self.get_event(event_id))
            self._store.save_stats(stats)
        return stats

    def _build_stats(self, event: Event) -> EventStats:
        # Computed before any store write so a failure leaves both records as they were.
        now = self._clock()
        previous = self._store.get_stats(event.id) or empty_stats(event, now)
        return compute_stats(event, previous, now)

    def _touch(self, event: Event) -> Event:
        # updated_at must move forward even when the clock has not ticked
        now = max(self._clock(), event.updated_at + timedelta(microseconds=1))
        return replace(event, updated_at=now)
