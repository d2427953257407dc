"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductInput:
    """Input: the writable fields of a product (name + price)."""

    name: str
    price: Money

    def __post_init__(self) -> None:
        # Prices are returned as JSON numbers, which cannot hold infinity.
        if not math.isfinite(float(self.price)):
            raise ValidationError(f"Price is too large: {self.price.amount:.6E}")

    @staticmethod
    def from_payload(payload: Any) -> ProductInput:
        """Validate a decoded JSON body. Any ``id`` in it is ignored."""
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")

        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Field 'name' must be a non-empty string")

        price = payload.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationError("Field 'price' must be a number")

        return ProductInput(name=name.strip(), price=Money.of(price))


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as returned to the caller."""

    id: int
    name: str
    price: float

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        """Build the DTO of a product that has already been saved."""
        if product.id is None:
            raise ValueError("Cannot build a ProductDTO from an unsaved product")
        return ProductDTO(id=product.id, name=product.name, price=float(product.price))
