"""
Tests for InMemoryEmployeeRepository.
"""

# Standard library imports
from decimal import Decimal

# Third-party imports
import pytest

# Local imports
from src.application.interfaces import DuplicateEntityError, EmployeeNotFoundError, EntityNotFoundError
from src.domain.entities import Employee, Intern
from src.infrastructure.repositories import InMemoryEmployeeRepository, default_roster


class TestDefaultRoster:
    def test_contents(self):
        roster = default_roster()

        assert [e.employee_id for e in roster] == ["F001", "I101", "A401"]

    def test_currency(self):
        assert all(e.calculate_salary().currency == "EUR" for e in default_roster("EUR"))


class TestInMemoryEmployeeRepository:
    """Test repository operations"""

    def test_defaults_to_roster(self):
        repository = InMemoryEmployeeRepository()

        assert len(repository.list_all()) == 3

    def test_empty_repository(self):
        repository = InMemoryEmployeeRepository([])

        assert repository.list_all() == []
        assert repository.get_payable_employees() == []

    def test_only_payables_are_returned(self):
        """Test that a plain Employee is stored but never paid"""
        plain = Employee("John", "101")
        repository = InMemoryEmployeeRepository([plain, Intern("Bob", "I101", Decimal("8000"))])

        assert plain in repository.list_all()
        assert [p.employee_id for p in repository.get_payable_employees()] == ["I101"]

    def test_get_by_id(self):
        repository = InMemoryEmployeeRepository()

        assert repository.get_by_id("I101").name == "Bob"

    def test_get_missing(self):
        repository = InMemoryEmployeeRepository()

        with pytest.raises(EmployeeNotFoundError) as exc_info:
            repository.get_by_id("X999")

        assert isinstance(exc_info.value, EntityNotFoundError)
        assert exc_info.value.employee_id == "X999"
        assert str(exc_info.value) == "Employee with identifier 'X999' not found"

    def test_add_duplicate(self):
        repository = InMemoryEmployeeRepository()

        with pytest.raises(DuplicateEntityError, match="already exists"):
            repository.add(Intern("Other", "I101", Decimal("1")))
