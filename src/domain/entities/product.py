"""
Product Entity - Catalog value object assembled with the Builder pattern.

Two builders produce the same immutable ``Product``:

- ``ProductBuilder`` validates eagerly (negative price at the setter) and at
  build time (name and positive price are required).
- ``LenientProductBuilder`` only accumulates fields and exposes read
  accessors; whatever was supplied ends up in the product.

Example:
    >>> product = (
    ...     Product.builder()
    ...     .set_name("iPhone 15 Pro")
    ...     .set_price(1399)
    ...     .set_images(["front.jpg", "back.jpg"])
    ...     .build()
    ... )
    >>> product.images
    ('front.jpg', 'back.jpg')
"""

from __future__ import annotations

# Standard library imports
import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Self

from ..constants import DEFAULT_CURRENCY, MAX_DISCOUNT_PCT
from ..exceptions import IncompleteProductError, InvalidPriceError
from ..value_objects import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    """
    Immutable catalog product.

    Instances are normally created through ``Product.builder()``; direct
    construction performs no validation.
    """

    name: str | None
    desc: str | None = None
    price: int = 0
    brand: str | None = None
    category: str | None = None
    discount: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    images: tuple[str, ...] = ()

    @staticmethod
    def builder() -> ProductBuilder:
        """Start a validating builder."""
        return ProductBuilder()

    def final_price(self, currency: str = DEFAULT_CURRENCY) -> Money:
        """Price after applying the percentage discount."""
        discount = min(max(self.discount, 0), MAX_DISCOUNT_PCT)
        factor = (Decimal(100) - Decimal(discount)) / Decimal(100)
        return Money(self.price, currency).multiply(factor).round()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""
        data = asdict(self)
        data["images"] = list(self.images)
        return data


class _ProductFields:
    """Field accumulation shared by both builders."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._desc: str | None = None
        self._price: int = 0
        self._brand: str | None = None
        self._category: str | None = None
        self._discount: int = 0
        self._created_at: str | None = None
        self._updated_at: str | None = None
        self._images: list[str] = []

    def set_name(self, name: str | None) -> Self:
        self._name = name
        return self

    def set_desc(self, desc: str | None) -> Self:
        self._desc = desc
        return self

    def set_price(self, price: int) -> Self:
        self._price = price
        return self

    def set_brand(self, brand: str | None) -> Self:
        self._brand = brand
        return self

    def set_category(self, category: str | None) -> Self:
        self._category = category
        return self

    def set_discount(self, discount: int) -> Self:
        self._discount = discount
        return self

    def set_created_at(self, created_at: str | None) -> Self:
        self._created_at = created_at
        return self

    def set_updated_at(self, updated_at: str | None) -> Self:
        self._updated_at = updated_at
        return self

    def set_images(self, images: Iterable[str] | None) -> Self:
        # Copy so later changes to the caller's list don't leak in
        self._images = list(images) if images is not None else []
        return self

    def _assemble(self) -> Product:
        return Product(
            name=self._name,
            desc=self._desc,
            price=self._price,
            brand=self._brand,
            category=self._category,
            discount=self._discount,
            created_at=self._created_at,
            updated_at=self._updated_at,
            images=tuple(self._images),
        )


class ProductBuilder(_ProductFields):
    """
    Validating product builder.

    Setters return the builder so calls can be chained. ``set_price`` rejects
    negative prices immediately; ``build`` rejects a missing name or a price
    that is not strictly positive.
    """

    def set_price(self, price: int) -> ProductBuilder:
        """
        Set the product price.

        Raises:
            InvalidPriceError: If price is negative
        """
        if price < 0:
            raise InvalidPriceError(price)
        self._price = price
        return self

    def build(self) -> Product:
        """
        Validate the accumulated fields and create the product.

        Raises:
            IncompleteProductError: If name is missing or price is not positive
        """
        missing = []
        if self._name is None:
            missing.append("name")
        if self._price <= 0:
            missing.append("price")
        if missing:
            logger.debug("Rejected product build, missing %s", missing)
            raise IncompleteProductError(missing)

        product = self._assemble()
        logger.debug("Built product %s", product.name)
        return product


class LenientProductBuilder(_ProductFields):
    """
    Non-validating product builder.

    Exposes getters for the accumulated fields and copies them into the
    product as-is.
    """

    def get_name(self) -> str | None:
        return self._name

    def get_desc(self) -> str | None:
        return self._desc

    def get_price(self) -> int:
        return self._price

    def get_brand(self) -> str | None:
        return self._brand

    def get_category(self) -> str | None:
        return self._category

    def get_discount(self) -> int:
        return self._discount

    def get_created_at(self) -> str | None:
        return self._created_at

    def get_updated_at(self) -> str | None:
        return self._updated_at

    def get_images(self) -> list[str]:
        return list(self._images)

    def build(self) -> Product:
        return self._assemble()
