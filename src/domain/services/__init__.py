"""Domain services for business logic that spans entities."""

from .payroll_calculator import PayrollCalculator, PayrollLine
from .report_generator import (
    Performance,
    PdfReportGenerator,
    PerformanceReportService,
    ReportGenerator,
    ReportGeneratorFactory,
    ReportType,
    UnsupportedReportGenerator,
    WordReportGenerator,
)

__all__ = [
    "PayrollCalculator",
    "PayrollLine",
    "ReportType",
    "ReportGenerator",
    "PdfReportGenerator",
    "WordReportGenerator",
    "UnsupportedReportGenerator",
    "ReportGeneratorFactory",
    "Performance",
    "PerformanceReportService",
]
