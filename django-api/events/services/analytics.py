"""Analytics provider.

The dashboard figures are placeholders until a real event feed exists;
callers depend on ``AnalyticsProvider`` so a real implementation can be
swapped in.
"""

import logging
import threading
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from events.domain import Analytics, ConversionFunnel, EventId
from events.stores.interfaces import EventOpsStore

logger = logging.getLogger(__name__)

PLACEHOLDER_FUNNEL = ConversionFunnel(
    page_views=1000,
    add_to_cart=300,
    checkout_initiated=150,
    completed=100,
)


class AnalyticsProvider(ABC):
    """Capability that returns the analytics snapshot for an event."""

    @abstractmethod
    def get_analytics(self, event_id: EventId) -> Analytics:
        ...


class PlaceholderAnalyticsProvider(AnalyticsProvider):
    """Returns a fixed-shape snapshot, created on first access."""

    def __init__(
        self, store: EventOpsStore, lock: AbstractContextManager | None = None
    ) -> None:
        self._store = store
        self._lock = lock or threading.RLock()

    def get_analytics(self, event_id: EventId) -> Analytics:
        with self._lock:
            analytics = self._store.get_analytics(event_id)
            if analytics is None:
                analytics = Analytics(event_id=event_id, conversion_funnel=PLACEHOLDER_FUNNEL)
                self._store.save_analytics(analytics)
                logger.debug("Initialized placeholder analytics for event %s", event_id)
        return analytics
