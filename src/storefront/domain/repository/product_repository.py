"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLite, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product, assign it a fresh id and return it.

        Ids are never reused, even after the product they belonged to
        has been deleted.
        """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, oldest first."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Overwrite the stored product with the same id.

        The caller is responsible for checking that the product exists.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product. Deleting an unknown id is a no-op."""
