"""Immutable value objects for type safety."""

from .money import Money

__all__ = ["Money"]
