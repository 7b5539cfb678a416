"""Statistics calculator.

Stats are always rebuilt from the event record; nothing is accumulated.
"""

import math
from dataclasses import replace
from datetime import datetime

from events.domain import Event, EventStats, Money

# No attendance feed exists yet, so attendance is simulated.
SIMULATED_ATTENDANCE_RATIO = 0.8


def empty_stats(event: Event, now: datetime) -> EventStats:
    """Zeroed stats record paired with a freshly created event."""
    return EventStats(event_id=event.id, created_at=now, updated_at=now)


def compute_stats(event: Event, previous: EventStats, now: datetime) -> EventStats:
    """Derive the aggregate figures for ``event``.

    Args:
        event: Current event state.
        previous: Stored stats; only ``created_at`` is carried over.
        now: Timestamp for ``updated_at``.
    """
    sold = event.tickets_sold
    capacity = event.total_capacity.value
    used = math.floor(sold * SIMULATED_ATTENDANCE_RATIO)

    if sold > 0:
        average_price = Money(amount=event.revenue.divide(sold)).quantize(2)
        attendance_rate = used / sold * 100
    else:
        average_price = "0"
        attendance_rate = 0.0

    sellout_rate = sold / capacity * 100 if capacity > 0 else 0.0

    return replace(
        previous,
        total_tickets=capacity,
        tickets_sold=sold,
        tickets_used=used,
        total_revenue=event.revenue,
        average_ticket_price=average_price,
        attendance_rate=attendance_rate,
        sellout_rate=sellout_rate,
        updated_at=now,
    )
