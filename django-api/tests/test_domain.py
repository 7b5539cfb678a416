"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import UUID

import pytest

from events.domain import Capacity, EventId, EventPatch, EventStatus, Money
from events.domain.errors import InvalidAmountError


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money.zero().amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-1"))

    def test_money_str_is_plain_decimal(self):
        """Money renders without padding or exponent notation."""
        assert str(Money.parse("50")) == "50"
        assert str(Money.parse("50.25")) == "50.25"
        assert str(Money.parse("1e2")) == "100"

    def test_money_quantize_two_places(self):
        """Money.quantize rounds half up to a fixed number of places."""
        assert Money.parse("50").quantize(2) == "50.00"
        assert Money.parse("2.345").quantize(2) == "2.35"

    def test_money_sums_exactly(self):
        """Adding money does not pick up binary rounding error."""
        total = Money.parse("0.1") + Money.parse("0.2")
        assert total.amount == Decimal("0.3")

    def test_parse_accepts_bounded_amounts(self):
        """Amounts just inside the limits parse exactly."""
        assert Money.parse("999999999999.999999").amount == Decimal("999999999999.999999")
        assert Money.parse("50.000000000").amount == Decimal("50")

    def test_parse_accepts_numbers(self):
        """Money.parse accepts JSON numbers as well as strings."""
        assert Money.parse(50).amount == Decimal("50")
        assert Money.parse(19.99).amount == Decimal("19.99")

    @pytest.mark.parametrize(
        "value",
        ["abc", "", "NaN", "Infinity", "-5", True, "1e30", "1000000000000", "0.0000001"],
    )
    def test_parse_rejects_invalid_amounts(self, value):
        """Money.parse raises InvalidAmountError for unusable input."""
        with pytest.raises(InvalidAmountError):
            Money.parse(value)


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(5000).value == 5000

    def test_capacity_rejects_zero(self):
        """Capacity raises ValueError for zero."""
        with pytest.raises(ValueError):
            Capacity(0)

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "3f1c2b7e-9a4d-4c1e-8b2a-6d5e4f3a2b1c"
        event_id = EventId.from_string(raw)
        assert event_id.value == UUID(raw)
        assert str(event_id) == raw

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("non-existent")

    def test_new_ids_are_unique(self):
        assert EventId.new() != EventId.new()


class TestEventStatus:
    """Tests for the status transition table."""

    @pytest.mark.parametrize(
        "current, target",
        [
            (EventStatus.DRAFT, EventStatus.ACTIVE),
            (EventStatus.ACTIVE, EventStatus.LIVE),
            (EventStatus.LIVE, EventStatus.ENDED),
            (EventStatus.DRAFT, EventStatus.CANCELLED),
            (EventStatus.LIVE, EventStatus.CANCELLED),
            (EventStatus.ACTIVE, EventStatus.ACTIVE),
        ],
    )
    def test_allowed_transitions(self, current, target):
        assert current.can_transition_to(target)

    @pytest.mark.parametrize(
        "current, target",
        [
            (EventStatus.ENDED, EventStatus.DRAFT),
            (EventStatus.DRAFT, EventStatus.LIVE),
            (EventStatus.LIVE, EventStatus.ACTIVE),
            (EventStatus.CANCELLED, EventStatus.ACTIVE),
            (EventStatus.ENDED, EventStatus.CANCELLED),
        ],
    )
    def test_rejected_transitions(self, current, target):
        assert not current.can_transition_to(target)


class TestEventPatch:
    """Tests for EventPatch."""

    def test_changes_only_include_supplied_fields(self):
        patch = EventPatch(name="Renamed", total_capacity=Capacity(10))
        assert patch.changes() == {"name": "Renamed", "total_capacity": Capacity(10)}

    def test_empty_patch_has_no_changes(self):
        assert EventPatch().changes() == {}
