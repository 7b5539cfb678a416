"""Business settings for the event operations service."""

from dataclasses import dataclass
from typing import Any, Mapping, Self


@dataclass(frozen=True)
class EventOpsConfig:
    """Behavior switches. Defaults keep the permissive legacy behavior."""

    allow_oversell: bool = True
    enforce_status_transitions: bool = False
    reports_require_event: bool = False

    @classmethod
    def from_settings(cls, values: Mapping[str, Any]) -> Self:
        return cls(
            allow_oversell=bool(values.get("ALLOW_OVERSELL", True)),
            enforce_status_transitions=bool(
                values.get("ENFORCE_STATUS_TRANSITIONS", False)
            ),
            reports_require_event=bool(values.get("REPORTS_REQUIRE_EVENT", False)),
        )
