"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopql.domain.exceptions import ValidationError
from shopql.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_is_exact(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            Money.of(True)

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_as_number_keeps_integers(self):
        assert Money.of("10").as_number() == 10
        assert isinstance(Money.of("10.00").as_number(), int)

    def test_as_number_fractional(self):
        assert Money.of("9.5").as_number() == 9.5

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_positive(self):
        assert Quantity(3).value == 3

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_increment_returns_new_value(self):
        q = Quantity(1)
        assert q.increment() == Quantity(2)
        assert q == Quantity(1)
