"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    STATS_NOT_FOUND = "STATS_NOT_FOUND"
    REPORT_NOT_FOUND = "REPORT_NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class StatsNotFoundError(DomainError):
    """Raised when no statistics exist for an event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.STATS_NOT_FOUND,
            message="Stats not found",
        )
        self.event_id = event_id


class ReportNotFoundError(DomainError):
    """Raised when a report is not found."""

    def __init__(self, report_id: str) -> None:
        super().__init__(
            code=ErrorCode.REPORT_NOT_FOUND,
            message="Report not found",
        )
        self.report_id = report_id


class InvalidAmountError(DomainError):
    """Raised when a sale amount is not a non-negative decimal."""

    def __init__(self, amount: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AMOUNT,
            message="amount must be a non-negative decimal number",
        )
        self.amount = amount


class InvalidStatusTransitionError(DomainError):
    """Raised when a status change is not in the transition table."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            message=f"Cannot move event from {current} to {target}",
        )


class CapacityExceededError(DomainError):
    """Raised when a sale would push tickets sold past capacity."""

    def __init__(self, event_id: str, capacity: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=f"Event is sold out ({capacity} tickets)",
        )
        self.event_id = event_id
