"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from sales.domain.exceptions import ValidationError
from sales.domain.model.value_objects import AggregateId, Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("lots")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_decimal_rounds_to_cents(self):
        assert Money.of("400") * Decimal("0.10") == Money.of("40.00")
        assert (Money.of("0.05") * Decimal("0.5")).amount == Decimal("0.03")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 0.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_distance_is_absolute(self):
        assert Money.of("100").distance_to(Money.of("106")) == Decimal("6")
        assert Money.of("106").distance_to(Money.of("100")) == Decimal("6")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") >= Money.of("10")


# ── AggregateId ──────────────────────────────────────────────────────────────


class TestAggregateId:

    def test_generated_ids_are_unique(self):
        assert AggregateId.generate() != AggregateId.generate()

    def test_equal_by_value(self):
        assert AggregateId("abc") == AggregateId("abc")
        assert str(AggregateId("abc")) == "abc"

    def test_blank_rejected(self):
        with pytest.raises(ValidationError, match="non-empty"):
            AggregateId("  ")
