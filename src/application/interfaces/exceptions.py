"""
Application Exception Definitions

Defines exceptions that repositories and notification channels may raise.
Following clean architecture principles - these are application-level exceptions.
"""


class RepositoryError(Exception):
    """Base exception for repository operations."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EntityNotFoundError(RepositoryError):
    """Raised when an entity is not found in the repository."""

    def __init__(self, entity_type: str, identifier: str) -> None:
        super().__init__(f"{entity_type} with identifier '{identifier}' not found")
        self.entity_type = entity_type
        self.identifier = identifier


class EmployeeNotFoundError(EntityNotFoundError):
    """Raised when an employee is not found."""

    def __init__(self, employee_id: str) -> None:
        super().__init__("Employee", employee_id)
        self.employee_id = employee_id


class DuplicateEntityError(RepositoryError):
    """Raised when attempting to create an entity that already exists."""

    def __init__(self, entity_type: str, identifier: str) -> None:
        super().__init__(f"{entity_type} with identifier '{identifier}' already exists")
        self.entity_type = entity_type
        self.identifier = identifier


class NotificationError(Exception):
    """Raised when a notification channel cannot deliver a message."""

    def __init__(self, channel: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(f"{channel} notification failed: {message}")
        self.channel = channel
        self.cause = cause
