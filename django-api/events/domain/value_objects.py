"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Self
from uuid import UUID, uuid4

from events.domain.errors import InvalidAmountError

# Sale amounts stay well inside the 28-digit decimal context so sums and
# two-place rounding are exact.
MAX_AMOUNT = Decimal("1e12")
MIN_AMOUNT_UNIT = Decimal("1e-6")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ReportId:
    """Unique identifier for a Report."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Exact decimal amount, transmitted as a string."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    @classmethod
    def parse(cls, value: str | int | float) -> Self:
        """Parse a decimal amount.

        Raises:
            InvalidAmountError: If the value is not a finite, non-negative number
                below MAX_AMOUNT with at most six decimal places.
        """
        if isinstance(value, bool):
            raise InvalidAmountError(value)
        try:
            # str() first so floats keep their shortest repr
            money = cls(amount=Decimal(str(value).strip()))
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(value) from None
        if money.amount >= MAX_AMOUNT:
            raise InvalidAmountError(value)
        if money.amount.quantize(MIN_AMOUNT_UNIT) != money.amount:
            raise InvalidAmountError(value)
        return money

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def divide(self, count: int) -> Decimal:
        return self.amount / Decimal(count)

    def quantize(self, places: int = 2) -> str:
        exponent = Decimal(1).scaleb(-places)
        return str(self.amount.quantize(exponent, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return format(self.amount, "f")


@dataclass(frozen=True)
class Capacity:
    """Positive integer representing how many tickets an event can sell."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Capacity must be positive")


class EventStatus(str, Enum):
    """Lifecycle status of an event."""

    DRAFT = "draft"
    ACTIVE = "active"
    LIVE = "live"
    ENDED = "ended"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (EventStatus.ENDED, EventStatus.CANCELLED)

    def can_transition_to(self, target: "EventStatus") -> bool:
        if target == self:
            return True
        if target == EventStatus.CANCELLED:
            return not self.is_terminal
        return _FORWARD_TRANSITIONS.get(self) == target


_FORWARD_TRANSITIONS = {
    EventStatus.DRAFT: EventStatus.ACTIVE,
    EventStatus.ACTIVE: EventStatus.LIVE,
    EventStatus.LIVE: EventStatus.ENDED,
}


class ReportType(str, Enum):
    """Kinds of report snapshot an admin can request."""

    SALES = "sales"
    ATTENDANCE = "attendance"
    REVENUE = "revenue"
    DEMOGRAPHIC = "demographic"
    PERFORMANCE = "performance"
