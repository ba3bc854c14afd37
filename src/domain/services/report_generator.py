"""
Report Generator - Domain service for employee performance reports.

Two dispatchers produce the same report text:

- ``Performance`` decides the output with a string comparison chain. Adding a
  format means editing this class.
- ``PerformanceReportService`` delegates to a ``ReportGenerator`` strategy.
  New formats are new classes registered with ``ReportGeneratorFactory``.

Supported report types are matched exactly (case-sensitive):

    "PDF"   -> "Generating PDF report."
    "Word"  -> "Generating Word report."
    other   -> "Report type not supported."

Design Patterns:
    - Strategy Pattern: One generator class per output format
    - Factory Pattern: Creates generators from a report type string

Example:
    >>> from src.domain.entities import Employee
    >>> service = PerformanceReportService()
    >>> service.generate_report(PdfReportGenerator(), Employee("John", "101"))
    'Generating PDF report.'
"""

# Standard library imports
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from ..entities.employee import Employee

logger = logging.getLogger(__name__)

UNSUPPORTED_REPORT_MESSAGE = "Report type not supported."


class ReportType(Enum):
    """Supported report output formats."""

    PDF = "PDF"
    WORD = "Word"


class ReportGenerator(ABC):
    """Interface for report generation strategies."""

    @abstractmethod
    def generate(self, employee: Employee) -> str:
        """
        Generate a report for an employee.

        Args:
            employee: Subject of the report

        Returns:
            str: Report text
        """
        pass


class PdfReportGenerator(ReportGenerator):
    """Generates PDF reports."""

    def generate(self, employee: Employee) -> str:
        return "Generating PDF report."


class WordReportGenerator(ReportGenerator):
    """Generates Word reports."""

    def generate(self, employee: Employee) -> str:
        return "Generating Word report."


class UnsupportedReportGenerator(ReportGenerator):
    """Fallback for report types nobody registered."""

    def generate(self, employee: Employee) -> str:
        return UNSUPPORTED_REPORT_MESSAGE


# Built-in formats; every factory starts from a copy of this mapping
BUILTIN_GENERATORS: Mapping[str, type[ReportGenerator]] = MappingProxyType(
    {
        ReportType.PDF.value: PdfReportGenerator,
        ReportType.WORD.value: WordReportGenerator,
    }
)


class ReportGeneratorFactory:
    """Factory for creating report generators.

    Maps report type strings to generator classes. Unknown types resolve to
    ``UnsupportedReportGenerator`` instead of raising, matching the
    string-switch behaviour. Each factory owns its registry, so a
    registration never leaks into other factories.
    """

    def __init__(self) -> None:
        self._generators: dict[str, type[ReportGenerator]] = dict(BUILTIN_GENERATORS)

    def create(self, report_type: str | ReportType) -> ReportGenerator:
        """Create a report generator for the given type.

        Args:
            report_type: Report type, either the enum or its string value

        Returns:
            ReportGenerator: Generator for the type, or the fallback
        """
        key = report_type.value if isinstance(report_type, ReportType) else report_type
        generator_class = self._generators.get(key)
        if generator_class is None:
            logger.warning(f"No report generator registered for type {key!r}")
            return UnsupportedReportGenerator()
        return generator_class()

    def register(self, report_type: str, generator_class: type[ReportGenerator]) -> None:
        """
        Register a generator class for a new report type.

        Raises:
            ValueError: If the type is built in or already registered
        """
        if report_type in BUILTIN_GENERATORS:
            raise ValueError(f"Cannot override built-in report type {report_type!r}")
        if report_type in self._generators:
            raise ValueError(f"Report type {report_type!r} is already registered")
        self._generators[report_type] = generator_class

    def supported_types(self) -> list[str]:
        return sorted(self._generators)


class Performance:
    """
    Report dispatcher using a string comparison chain.

    Every new format requires editing ``generate_report``; compare with
    ``PerformanceReportService``.
    """

    def generate_report(self, report_type: str, employee: Employee) -> str:
        if report_type == "PDF":
            return "Generating PDF report."
        elif report_type == "Word":
            return "Generating Word report."
        return UNSUPPORTED_REPORT_MESSAGE


class PerformanceReportService:
    """Report dispatcher that delegates to a generator strategy."""

    def __init__(self, factory: ReportGeneratorFactory | None = None) -> None:
        self.factory = factory or ReportGeneratorFactory()

    def generate_report(self, generator: ReportGenerator, employee: Employee) -> str:
        """Run a generator for an employee."""
        report = generator.generate(employee)
        logger.debug(
            f"Generated report with {type(generator).__name__}",
            extra={"employee_id": employee.employee_id},
        )
        return report

    def generate_report_for_type(self, report_type: str | ReportType, employee: Employee) -> str:
        """Resolve the generator through the factory, then run it."""
        return self.generate_report(self.factory.create(report_type), employee)
