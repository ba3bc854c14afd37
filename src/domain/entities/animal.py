"""
Animal Entities - Abstract base class combined with a capability interface.

``Animal`` supplies shared state and a concrete ``sleep``; subclasses must
provide ``make_sound``. ``Dolphin`` adds the ``Swimmable`` capability and
extends ``sleep`` rather than replacing it.
"""

import logging
from abc import ABC, abstractmethod

from ..interfaces.capabilities import Swimmable

logger = logging.getLogger(__name__)


class Animal(ABC):
    """Base animal with a name."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def make_sound(self) -> str:
        pass

    def sleep(self) -> str:
        message = "animal is sleeping..."
        logger.debug(message)
        return message


class Dolphin(Animal, Swimmable):
    """Dolphin that makes sounds, swims and sleeps."""

    def make_sound(self) -> str:
        return f"{self.name} makes clicking sounds"

    def swim(self) -> str:
        return f"{self.name} is swimming fast!"

    def sleep(self) -> str:
        """Base sleep line followed by the dolphin's own, newline separated."""
        base = super().sleep()
        own = f"{self.name} is sleeping....."
        logger.debug(own)
        return f"{base}\n{own}"
