"""
In-Memory Employee Repository

Concrete implementation of IEmployeeRepository backed by a dict. The roster
lives only as long as the repository instance.
"""

# Standard library imports
import logging
from collections.abc import Iterable
from decimal import Decimal

# Local imports
from src.application.interfaces.exceptions import DuplicateEntityError, EmployeeNotFoundError
from src.application.interfaces.repositories import IEmployeeRepository
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.entities.employee import Employee, FullTimeEmployee, Intern, Vendor
from src.domain.interfaces.payable import Payable

logger = logging.getLogger(__name__)


def default_roster(currency: str = DEFAULT_CURRENCY) -> list[Employee]:
    """The starter roster: one full-time employee, one intern, one vendor."""
    return [
        FullTimeEmployee("Alice", "F001", Decimal("50000"), Decimal("10000"), currency=currency),
        Intern("Bob", "I101", Decimal("8000"), currency=currency),
        Vendor("accenture", "A401", Decimal("5000000"), currency=currency),
    ]


class InMemoryEmployeeRepository(IEmployeeRepository):
    """Dict-backed implementation of IEmployeeRepository."""

    def __init__(self, employees: Iterable[Employee] | None = None) -> None:
        """
        Initialize repository.

        Args:
            employees: Initial roster; defaults to ``default_roster()``
        """
        self._employees: dict[str, Employee] = {}
        for employee in default_roster() if employees is None else employees:
            self.add(employee)

    def get_payable_employees(self) -> list[Payable]:
        return [employee for employee in self._employees.values() if isinstance(employee, Payable)]

    def get_by_id(self, employee_id: str) -> Employee:
        try:
            return self._employees[employee_id]
        except KeyError:
            raise EmployeeNotFoundError(employee_id) from None

    def add(self, employee: Employee) -> Employee:
        if employee.employee_id in self._employees:
            raise DuplicateEntityError("Employee", employee.employee_id)
        self._employees[employee.employee_id] = employee
        logger.debug(f"Added employee {employee.employee_id}")
        return employee

    def list_all(self) -> list[Employee]:
        return list(self._employees.values())
