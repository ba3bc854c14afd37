"""Tests for the Money value object."""

# Standard library imports
from decimal import Decimal

# Third-party imports
import pytest

# Local imports
from src.domain.value_objects import Money


class TestMoney:
    """Test cases for Money value object."""

    def test_create_money_from_different_types(self):
        """Test creating Money from various input types."""
        assert Money(100).amount == Decimal("100")
        assert Money(99.99).amount == Decimal("99.99")
        assert Money("50.50").amount == Decimal("50.50")
        assert Money(Decimal("25.25")).amount == Decimal("25.25")

    def test_currency_validation(self):
        """Test currency code validation."""
        assert Money(100).currency == "USD"
        assert Money(100, "eur").currency == "EUR"

        with pytest.raises(ValueError):
            Money(100, "US")

        with pytest.raises(ValueError):
            Money(100, "USDT")

        with pytest.raises(ValueError):
            Money(100, "U2D")

    def test_add_requires_same_currency(self):
        """Test addition rules."""
        assert Money(100).add(Money(50)) == Money(150)

        with pytest.raises(ValueError, match="Cannot add"):
            Money(100).add(Money(50, "EUR"))

        with pytest.raises(TypeError):
            Money(100).add(50)  # type: ignore[arg-type]

    def test_sum_of_money(self):
        """Test that sum() works thanks to right-side addition."""
        assert sum([Money(1), Money(2), Money(3)]) == Money(6)

    def test_multiply_and_round(self):
        """Test multiplication and rounding."""
        assert Money(10).multiply(Decimal("0.333")).round() == Money(Decimal("3.33"))

    def test_comparisons(self):
        """Test ordering against Money and numbers."""
        assert Money(5) < Money(10)
        assert Money(10) >= 10
        assert Money(10) > 9.5

        with pytest.raises(ValueError):
            assert Money(5, "EUR") < Money(10)

    def test_equality_and_hash(self):
        """Test value semantics."""
        assert Money(10) == Money(Decimal("10.00"))
        assert Money(10) != Money(10, "EUR")
        assert Money(10) != Decimal("10")
        assert len({Money(10), Money(Decimal("10.0"))}) == 1

    def test_immutability(self):
        """Test that attributes cannot be changed."""
        money = Money(10)

        with pytest.raises(AttributeError):
            money._amount = Decimal("20")  # type: ignore[misc]

    def test_format(self):
        """Test display formatting."""
        assert Money(Decimal("60000")).format() == "$60,000.00"
        assert Money(Decimal("1200.5"), "EUR").format() == "1,200.50 EUR"
        assert Money(Decimal("12.345")).format(include_currency=False) == "12.35"
        assert str(Money(1)) == "$1.00"
        assert repr(Money(1)) == "Money(1, 'USD')"

    def test_zero(self):
        """Test zero factory."""
        assert Money.zero() == Money(0)
        assert Money.zero("gbp").currency == "GBP"
        assert Money(-1).is_negative()
