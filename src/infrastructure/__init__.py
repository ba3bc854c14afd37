"""Infrastructure Layer.

This module provides concrete implementations of the application layer interfaces.

Key modules:
- notifications: Email, Skype and composite notification channels
- repositories: In-memory employee repository with the starter roster
- monitoring: Structured logging with correlation IDs and trace context
- container: Dependency injection wiring driven by ApplicationConfig

Example usage:
    from src.infrastructure.container import create_container
    from src.application.use_cases import RunPayrollRequest, RunPayrollUseCase

    container = create_container(configure_logging=True)
    response = container.get(RunPayrollUseCase).execute(RunPayrollRequest())
    print(response.total)
"""
