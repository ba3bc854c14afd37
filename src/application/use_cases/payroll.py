"""
Payroll Use Cases

Pays every payable employee on the roster.
"""

from dataclasses import dataclass, field

from src.application.interfaces.repositories import IEmployeeRepository
from src.domain.services.payroll_calculator import PayrollCalculator, PayrollLine
from src.domain.value_objects import Money

from .base import UseCase, UseCaseRequest, UseCaseResponse


@dataclass(kw_only=True)
class RunPayrollRequest(UseCaseRequest):
    """Request to run payroll, optionally for a subset of employee ids."""

    employee_ids: list[str] | None = None


@dataclass(kw_only=True)
class RunPayrollResponse(UseCaseResponse):
    """Response with per-payee lines and the total."""

    lines: list[PayrollLine] = field(default_factory=list)
    total: Money | None = None


class RunPayrollUseCase(UseCase[RunPayrollRequest, RunPayrollResponse]):
    """Computes salaries for the payable employees in the repository."""

    response_type = RunPayrollResponse

    def __init__(self, employee_repository: IEmployeeRepository, calculator: PayrollCalculator) -> None:
        super().__init__("RunPayrollUseCase")
        self.employee_repository = employee_repository
        self.calculator = calculator

    def validate(self, request: RunPayrollRequest) -> str | None:
        if request.employee_ids is not None and not request.employee_ids:
            return "Employee id list cannot be empty when provided"
        return None

    def process(self, request: RunPayrollRequest) -> RunPayrollResponse:
        payables = self.employee_repository.get_payable_employees()
        if request.employee_ids is not None:
            wanted = set(request.employee_ids)
            payables = [p for p in payables if getattr(p, "employee_id", None) in wanted]

        lines = self.calculator.calculate_all(payables)
        total = sum((line.amount for line in lines), Money.zero(self.calculator.currency))

        for line in lines:
            self.logger.info(
                f"Salary: {line.amount.amount}",
                extra={"payee_id": line.payee_id, "payee_type": line.payee_type},
            )

        return RunPayrollResponse.success_response(
            {"lines": [line.to_dict() for line in lines], "total": str(total.amount)},
            request.request_id,
            lines=lines,
            total=total,
        )
