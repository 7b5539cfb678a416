"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.conf import EventOpsConfig
from events.dependencies import reset_container
from events.services import EventService, PlaceholderAnalyticsProvider, ReportService
from events.stores import InMemoryEventOpsStore

EVENT_DATE = datetime(2030, 6, 1, 19, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def fresh_container():
    """Every test starts with an empty process-wide store."""
    container = reset_container()
    yield container
    reset_container()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store() -> InMemoryEventOpsStore:
    return InMemoryEventOpsStore()


@pytest.fixture
def config() -> EventOpsConfig:
    return EventOpsConfig()


@pytest.fixture
def event_service(store, config, clock) -> EventService:
    return EventService(store, config=config, clock=clock)


@pytest.fixture
def analytics_provider(store) -> PlaceholderAnalyticsProvider:
    return PlaceholderAnalyticsProvider(store)


@pytest.fixture
def report_service(store, analytics_provider, config, clock) -> ReportService:
    return ReportService(store, analytics_provider, config=config, clock=clock)


@pytest.fixture
def make_event(event_service):
    def _make_event(**overrides):
        fields = {
            "name": "Music Festival 2030",
            "description": "Annual music festival",
            "event_date": EVENT_DATE,
            "location": "Central Park",
            "total_capacity": 1000,
            "admin_id": "admin-123",
        }
        fields.update(overrides)
        return event_service.create_event(**fields)

    return _make_event
