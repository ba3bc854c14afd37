"""
Application Interfaces - Port Contracts

This module defines the interface contracts that the infrastructure layer
must implement. Following the dependency inversion principle, the application
layer defines what it needs, and the infrastructure layer provides it.
"""

from .exceptions import (
    DuplicateEntityError,
    EmployeeNotFoundError,
    EntityNotFoundError,
    NotificationError,
    RepositoryError,
)
from .notification import INotificationService
from .repositories import IEmployeeRepository

__all__ = [
    # Ports
    "INotificationService",
    "IEmployeeRepository",
    # Exceptions
    "RepositoryError",
    "EntityNotFoundError",
    "EmployeeNotFoundError",
    "DuplicateEntityError",
    "NotificationError",
]
