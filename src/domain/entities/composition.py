"""
Composition Entities - combining behaviour without multiple class inheritance.

Two approaches are shown:

- ``DualGreeter`` inherits two capabilities whose defaults collide and
  resolves the conflict explicitly instead of relying on the MRO.
- ``CompositeD`` holds a ``ComponentX`` and a ``ComponentY`` and delegates to
  them, getting both behaviours through composition.
"""

from ..interfaces.capabilities import GreeterA, GreeterB


class DualGreeter(GreeterA, GreeterB):
    """Implements both greeters and picks ``GreeterB`` explicitly."""

    def greet(self) -> str:
        return GreeterB.greet(self)


class ComponentX:
    def a_method(self) -> str:
        return "A method"


class ComponentY:
    def b_method(self) -> str:
        return "B method"


class CompositeD:
    """Gains the behaviour of X and Y by holding one of each."""

    def __init__(self, a: ComponentX | None = None, b: ComponentY | None = None) -> None:
        self.a = a or ComponentX()
        self.b = b or ComponentY()

    def use_a(self) -> str:
        return self.a.a_method()

    def use_b(self) -> str:
        return self.b.b_method()
