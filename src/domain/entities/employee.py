"""
Employee Entities - Workers and the ways they get paid.

``Employee`` carries identity only. Pay is a separate ``Payable`` capability,
so each variant computes its own salary and a payroll run can treat any of
them interchangeably:

- FullTimeEmployee: base pay + stock options
- Intern: stipend
- Vendor: project fee
"""

from __future__ import annotations

# Standard library imports
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from ..constants import DEFAULT_CURRENCY
from ..interfaces.payable import Payable
from ..value_objects import Money


def _non_negative(entity: Employee, field_name: str, value: Decimal | int | float) -> Decimal:
    label = f"{type(entity).__name__} {entity.employee_id}: {field_name}"
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{label} must be a number, got {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"{label} must be a finite number, got {value}")
    if amount < 0:
        raise ValueError(f"{label} cannot be negative, got {value}")
    return amount


@dataclass
class Employee:
    """Person or organisation on the roster."""

    name: str
    employee_id: str

    def __post_init__(self) -> None:
        """Validate employee identity"""
        if not self.name:
            raise ValueError("Employee name cannot be empty")
        if not self.employee_id:
            raise ValueError("Employee id cannot be empty")

    def get_name(self) -> str:
        return self.name

    def get_id(self) -> str:
        return self.employee_id


@dataclass
class FullTimeEmployee(Employee, Payable):
    """Salaried employee paid base pay plus stock options."""

    base_pay: Decimal = Decimal("0")
    stock_options: Decimal = Decimal("0")
    currency: str = field(default=DEFAULT_CURRENCY, kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.base_pay = _non_negative(self, "base_pay", self.base_pay)
        self.stock_options = _non_negative(self, "stock_options", self.stock_options)

    def calculate_salary(self) -> Money:
        return Money(self.base_pay + self.stock_options, self.currency)


@dataclass
class Intern(Employee, Payable):
    """Intern paid a fixed stipend."""

    stipend: Decimal = Decimal("0")
    currency: str = field(default=DEFAULT_CURRENCY, kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.stipend = _non_negative(self, "stipend", self.stipend)

    def calculate_salary(self) -> Money:
        return Money(self.stipend, self.currency)


@dataclass
class Vendor(Employee, Payable):
    """External vendor paid per project."""

    project_fee: Decimal = Decimal("0")
    currency: str = field(default=DEFAULT_CURRENCY, kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.project_fee = _non_negative(self, "project_fee", self.project_fee)

    def calculate_salary(self) -> Money:
        return Money(self.project_fee, self.currency)
