"""
Capability interfaces with default and static behaviour.

Abstract base classes can carry concrete methods alongside abstract ones, so
an implementer inherits a working default and only overrides what differs.
"""

from abc import ABC, abstractmethod


class Flyable(ABC):
    """Something that can fly; provides a default ``start`` sequence."""

    def start(self) -> str:
        """Default start sequence, used unless an implementer overrides it."""
        return "Default start"

    @staticmethod
    def maintenance_tip() -> str:
        """Maintenance advice that belongs to the capability, not an instance."""
        return "Check oil every 5000 km"


class Swimmable(ABC):
    """Something that can swim."""

    @abstractmethod
    def swim(self) -> str:
        pass


class GreeterA:
    """Greeting capability with a default greeting."""

    def greet(self) -> str:
        return "Hello from A"


class GreeterB:
    """Second greeting capability whose default collides with ``GreeterA``."""

    def greet(self) -> str:
        return "Hello from B"
