"""
Repository Infrastructure Module

Provides concrete implementations of the repository interfaces.
"""

from .employee_repository import InMemoryEmployeeRepository, default_roster

__all__ = [
    "InMemoryEmployeeRepository",
    "default_roster",
]
