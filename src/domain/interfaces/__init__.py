"""
Domain interfaces (capabilities) that entities implement.

These abstract contracts let services depend on what an entity can do rather
than on its concrete type: a payroll run needs ``Payable``, not ``Intern``.
"""

from .capabilities import Flyable, GreeterA, GreeterB, Swimmable
from .payable import Payable

__all__ = ["Payable", "Flyable", "Swimmable", "GreeterA", "GreeterB"]
