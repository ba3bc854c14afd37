"""Money value object for salaries, fees and product prices."""

# Standard library imports
from decimal import ROUND_HALF_UP, Decimal
from typing import Self

from ..constants import CURRENCY_CODE_LENGTH, DEFAULT_CURRENCY


class Money:
    """Immutable value object representing money with currency and precision."""

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: Decimal | float | int | str, currency: str = DEFAULT_CURRENCY) -> None:
        """Initialize Money with amount and currency.

        Args:
            amount: The monetary amount (converted to Decimal)
            currency: ISO 4217 currency code (default: USD)

        Raises:
            ValueError: If currency is invalid
        """
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        currency = currency.upper()
        if len(currency) != CURRENCY_CODE_LENGTH or not currency.isalpha():
            raise ValueError(f"Invalid currency code: {currency}")

        object.__setattr__(self, "_amount", amount)
        object.__setattr__(self, "_currency", currency)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Cannot modify immutable Money attribute '{name}'")

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Self:
        """Create a zero amount in the given currency."""
        return cls(Decimal("0"), currency)

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency

    def add(self, other: Self) -> Self:
        """Add two money values.

        Raises:
            TypeError: If other is not Money
            ValueError: If currencies don't match
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot add Money and {type(other)}")
        if self._currency != other._currency:
            raise ValueError(f"Cannot add {self._currency} and {other._currency}")

        return type(self)(self._amount + other._amount, self._currency)

    def multiply(self, factor: Decimal | float | int) -> Self:
        """Multiply money by a factor."""
        if not isinstance(factor, Decimal):
            factor = Decimal(str(factor))

        return type(self)(self._amount * factor, self._currency)

    def round(self, decimal_places: int = 2) -> Self:
        """Round to specified decimal places."""
        quantizer = Decimal(10) ** -decimal_places
        rounded = self._amount.quantize(quantizer, rounding=ROUND_HALF_UP)
        return type(self)(rounded, self._currency)

    def is_negative(self) -> bool:
        """Check if amount is negative."""
        return self._amount < 0

    def format(self, include_currency: bool = True, decimal_places: int = 2) -> str:
        """Format money for display.

        Args:
            include_currency: Whether to include currency symbol
            decimal_places: Number of decimal places to show

        Returns:
            Formatted string such as "$60,000.00" or "1,200.00 EUR"
        """
        display_amount = self.round(decimal_places)._amount
        formatted = f"{display_amount:,.{decimal_places}f}"

        if include_currency:
            if self._currency == "USD":
                return f"${formatted}"
            return f"{formatted} {self._currency}"

        return formatted

    def _check_comparable(self, other: object) -> Decimal:
        if isinstance(other, Money):
            if self._currency != other._currency:
                raise ValueError(f"Cannot compare {self._currency} and {other._currency}")
            return other._amount
        if isinstance(other, (Decimal, int, float)):
            return Decimal(str(other))
        raise TypeError(f"Cannot compare Money and {type(other)}")

    def __eq__(self, other: object) -> bool:
        """Check equality with another Money instance."""
        if not isinstance(other, Money):
            return False
        return self._amount == other._amount and self._currency == other._currency

    def __lt__(self, other: Self | Decimal | int | float) -> bool:
        return self._amount < self._check_comparable(other)

    def __le__(self, other: Self | Decimal | int | float) -> bool:
        return self._amount <= self._check_comparable(other)

    def __gt__(self, other: Self | Decimal | int | float) -> bool:
        return self._amount > self._check_comparable(other)

    def __ge__(self, other: Self | Decimal | int | float) -> bool:
        return self._amount >= self._check_comparable(other)

    def __hash__(self) -> int:
        return hash((self._amount, self._currency))

    def __repr__(self) -> str:
        return f"Money({self._amount}, '{self._currency}')"

    def __str__(self) -> str:
        return self.format()

    def __add__(self, other: Self | Decimal | float | int) -> Self:
        """Add Money to another Money or a numeric value in the same currency."""
        if isinstance(other, Money):
            return self.add(other)
        if isinstance(other, (Decimal, float, int)):
            if not isinstance(other, Decimal):
                other = Decimal(str(other))
            return type(self)(self._amount + other, self._currency)
        return NotImplemented

    def __radd__(self, other: Decimal | float | int) -> Self:
        """Right-side addition, so that sum() works with its integer start value."""
        return self.__add__(other)
