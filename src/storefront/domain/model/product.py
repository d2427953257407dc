"""Product aggregate.

The only entity in the catalog. The store assigns ``id`` on creation;
name and price are overwritten in place by updates.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because renaming and repricing are
    legitimate mutations on the aggregate. ``id`` is ``None`` until the
    product has been persisted.
    """

    name: str
    price: Money
    id: int | None = None

    def __post_init__(self) -> None:
        self.name = _clean_name(self.name)

    def revise(self, name: str, price: Money) -> None:
        """Overwrite name and price, keeping the identity."""
        self.name = _clean_name(name)
        self.price = price


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()
