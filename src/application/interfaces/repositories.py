"""
Repository Interface Definitions

Defines the contracts that infrastructure repositories must implement.
Following the Repository pattern and clean architecture principles.
"""

# Standard library imports
from abc import abstractmethod
from typing import Protocol

# Local imports
from src.domain.entities.employee import Employee
from src.domain.interfaces.payable import Payable


class IEmployeeRepository(Protocol):
    """
    Employee repository interface.

    Defines operations for storing and retrieving employees.
    The infrastructure layer must implement this interface.
    """

    @abstractmethod
    def get_payable_employees(self) -> list[Payable]:
        """
        Retrieve every employee that can be paid.

        Returns:
            Payable employees in insertion order, empty if none
        """
        ...

    @abstractmethod
    def get_by_id(self, employee_id: str) -> Employee:
        """
        Retrieve an employee by id.

        Raises:
            EmployeeNotFoundError: If no employee has the id
        """
        ...

    @abstractmethod
    def add(self, employee: Employee) -> Employee:
        """
        Add an employee to the roster.

        Raises:
            DuplicateEntityError: If the id is already taken
        """
        ...

    @abstractmethod
    def list_all(self) -> list[Employee]:
        ...
