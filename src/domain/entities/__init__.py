"""Domain entities with business logic."""

from .aircraft import Airplane
from .animal import Animal, Dolphin
from .composition import ComponentX, ComponentY, CompositeD, DualGreeter
from .employee import Employee, FullTimeEmployee, Intern, Vendor
from .product import LenientProductBuilder, Product, ProductBuilder

__all__ = [
    "Product",
    "ProductBuilder",
    "LenientProductBuilder",
    "Employee",
    "FullTimeEmployee",
    "Intern",
    "Vendor",
    "Animal",
    "Dolphin",
    "Airplane",
    "DualGreeter",
    "ComponentX",
    "ComponentY",
    "CompositeD",
]
