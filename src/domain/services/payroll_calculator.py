"""
Payroll Calculator - Domain service for paying anything ``Payable``.

The calculator never inspects concrete types: full-time employees, interns
and vendors all go through the same ``calculate_salary`` call. A new kind of
payee works here as soon as it implements ``Payable`` correctly.
"""

# Standard library imports
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..constants import DEFAULT_CURRENCY
from ..interfaces.payable import Payable
from ..value_objects import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollLine:
    """Amount owed to a single payee."""

    payee_name: str
    payee_id: str
    payee_type: str
    amount: Money

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization"""
        return {
            "payee_name": self.payee_name,
            "payee_id": self.payee_id,
            "payee_type": self.payee_type,
            "amount": str(self.amount.amount),
            "currency": self.amount.currency,
        }


class PayrollCalculator:
    """Computes salary lines and totals for payables."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency.upper()

    def calculate(self, payable: Payable) -> PayrollLine:
        """
        Calculate the payroll line for one payable.

        Raises:
            ValueError: If the payable reports a negative salary or a salary in
                another currency
        """
        amount = payable.calculate_salary()
        if amount.is_negative():
            raise ValueError(f"Salary cannot be negative, got {amount!r}")
        if amount.currency != self.currency:
            raise ValueError(
                f"Salary currency {amount.currency} does not match payroll currency {self.currency}"
            )

        return PayrollLine(
            payee_name=getattr(payable, "name", ""),
            payee_id=getattr(payable, "employee_id", ""),
            payee_type=type(payable).__name__,
            amount=amount,
        )

    def calculate_all(self, payables: Iterable[Payable]) -> list[PayrollLine]:
        return [self.calculate(payable) for payable in payables]

    def total(self, payables: Iterable[Payable]) -> Money:
        """Sum of all salaries, zero for an empty roster."""
        total = Money.zero(self.currency)
        for line in self.calculate_all(payables):
            total = total.add(line.amount)
        logger.debug(f"Payroll total {total!r}")
        return total
