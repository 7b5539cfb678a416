"""Wiring between the HTTP layer and the services.

One store and one set of services exist per process. Tests call
``reset_container()`` to start from an empty store.
"""

import threading
from dataclasses import dataclass

from django.conf import settings

from events.conf import EventOpsConfig
from events.services import (
    AnalyticsProvider,
    EventService,
    PlaceholderAnalyticsProvider,
    ReportService,
)
from events.stores import EventOpsStore, InMemoryEventOpsStore


@dataclass(frozen=True)
class ServiceContainer:
    store: EventOpsStore
    events: EventService
    analytics: AnalyticsProvider
    reports: ReportService


def build_container(config: EventOpsConfig | None = None) -> ServiceContainer:
    config = config or EventOpsConfig.from_settings(getattr(settings, "EVENT_OPS", {}))
    store = InMemoryEventOpsStore()
    lock = threading.RLock()
    analytics = PlaceholderAnalyticsProvider(store, lock=lock)
    return ServiceContainer(
        store=store,
        events=EventService(store, config=config, lock=lock),
        analytics=analytics,
        reports=ReportService(store, analytics, config=config, lock=lock),
    )


_container: ServiceContainer | None = None
_container_lock = threading.Lock()


def get_container() -> ServiceContainer:
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = build_container()
    return _container


def reset_container(config: EventOpsConfig | None = None) -> ServiceContainer:
    global _container
    with _container_lock:
        _container = build_container(config)
    return _container


def get_event_service() -> EventService:
    return get_container().events


def get_analytics_provider() -> AnalyticsProvider:
    return get_container().analytics


def get_report_service() -> ReportService:
    return get_container().reports
