"""
Payable capability.

Anything that can be paid exposes ``calculate_salary``. Employees, interns
and external vendors all qualify even though they share no payroll logic.
"""

from abc import ABC, abstractmethod

from ..value_objects import Money


class Payable(ABC):
    """Capability exposing a salary computation."""

    @abstractmethod
    def calculate_salary(self) -> Money:
        """
        Calculate the amount owed for one pay period.

        Returns:
            Money: Amount owed, never negative
        """
        pass
