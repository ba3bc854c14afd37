"""Aircraft Entities - implement ``Flyable`` and rely on its defaults."""

from ..interfaces.capabilities import Flyable


class Airplane(Flyable):
    """Airplane that keeps the default start sequence."""
