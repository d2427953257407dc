"""In-memory fake repository for testing.

Implements the same abstract interface as the SQLite repository
but keeps everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import replace

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.add(p)

    def add(self, product: Product) -> Product:
        product.id = self._next_id
        self._next_id += 1
        self._store[product.id] = replace(product)
        return product

    def get_by_id(self, product_id: int) -> Product | None:
        stored = self._store.get(product_id)
        return replace(stored) if stored else None

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._store.values()]

    def update(self, product: Product) -> None:
        self._store[product.id] = replace(product)

    def delete(self, product_id: int) -> None:
        self._store.pop(product_id, None)
