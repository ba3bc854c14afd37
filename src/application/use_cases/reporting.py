"""
Reporting Use Cases

Generates employee performance reports through the strategy dispatcher.
"""

from dataclasses import dataclass

from src.domain.entities.employee import Employee
from src.domain.services.report_generator import PerformanceReportService

from .base import UseCase, UseCaseRequest, UseCaseResponse


@dataclass(kw_only=True)
class GeneratePerformanceReportRequest(UseCaseRequest):
    """Request to generate a report of the given type for an employee."""

    report_type: str
    employee: Employee


@dataclass(kw_only=True)
class GeneratePerformanceReportResponse(UseCaseResponse):
    """Response with the report text."""

    report: str | None = None


class GeneratePerformanceReportUseCase(
    UseCase[GeneratePerformanceReportRequest, GeneratePerformanceReportResponse]
):
    """
    Resolves a generator for the report type and runs it.

    Unknown report types are not an error: they yield the
    "Report type not supported." text, same as the string-switch dispatcher.
    """

    response_type = GeneratePerformanceReportResponse

    def __init__(self, report_service: PerformanceReportService) -> None:
        super().__init__("GeneratePerformanceReportUseCase")
        self.report_service = report_service

    def validate(self, request: GeneratePerformanceReportRequest) -> str | None:
        if request.employee is None:
            return "Employee is required"
        return None

    def process(self, request: GeneratePerformanceReportRequest) -> GeneratePerformanceReportResponse:
        report = self.report_service.generate_report_for_type(request.report_type, request.employee)
        return GeneratePerformanceReportResponse.success_response(
            report, request.request_id, report=report
        )
