"""Application service: Product catalog access.

A thin pass-through to the repository. It holds no pricing policy;
discounts are applied by the create/update use cases before they call
in here.
"""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def list_products(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_product(self, product_id: int) -> Product | None:
        return self._product_repo.get_by_id(product_id)

    def create_product(self, name: str, price: Money) -> Product:
        return self._product_repo.add(Product(name=name, price=price))

    def update_product(self, product_id: int, name: str, price: Money) -> Product:
        """Overwrite name and price of an existing product.

        Existence is NOT checked here; callers fetch the product first.
        """
        product = Product(id=product_id, name=name, price=price)
        self._product_repo.update(product)
        return product

    def delete_product(self, product_id: int) -> None:
        self._product_repo.delete(product_id)
