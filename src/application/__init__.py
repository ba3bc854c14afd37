"""
Application Layer - Use Cases and Orchestration

This layer contains:
- Configuration: Environment and YAML driven settings
- Interfaces: Port contracts (repositories, notification channels)
- Services: Application-level services
- Use Cases: Orchestration of domain logic with logging and error handling

Depends on domain layer, orchestrates business logic.
Defines interfaces that infrastructure layer must implement.
"""

from .interfaces import (
    DuplicateEntityError,
    EmployeeNotFoundError,
    EntityNotFoundError,
    IEmployeeRepository,
    INotificationService,
    NotificationError,
    RepositoryError,
)

__all__ = [
    # Ports
    "IEmployeeRepository",
    "INotificationService",
    # Exceptions
    "RepositoryError",
    "EntityNotFoundError",
    "EmployeeNotFoundError",
    "DuplicateEntityError",
    "NotificationError",
]
