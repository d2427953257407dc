"""Tests for the ProductService pass-through, using the in-memory fake."""

from storefront.application.product_service import ProductService
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup() -> tuple[ProductService, FakeProductRepository]:
    repo = FakeProductRepository(
        [
            Product(name="Widget", price=Money.of("15.00")),
            Product(name="Gadget", price=Money.of("25.00")),
        ]
    )
    return ProductService(repo), repo


class TestProductService:

    def test_list_products(self):
        service, _ = _setup()
        assert [p.name for p in service.list_products()] == ["Widget", "Gadget"]

    def test_get_product(self):
        service, _ = _setup()
        assert service.get_product(2).name == "Gadget"

    def test_get_missing_product_returns_none(self):
        service, _ = _setup()
        assert service.get_product(99) is None

    def test_create_assigns_fresh_id(self):
        service, repo = _setup()
        product = service.create_product("Gizmo", Money.of("5.00"))
        assert product.id == 3
        assert repo.get_by_id(3).name == "Gizmo"

    def test_create_does_not_discount(self):
        service, _ = _setup()
        product = service.create_product("Gizmo", Money.of("5.00"))
        assert product.price == Money.of("5.00")

    def test_update_overwrites_name_and_price(self):
        service, repo = _setup()
        service.update_product(1, "Widget Pro", Money.of("18.00"))
        stored = repo.get_by_id(1)
        assert stored.name == "Widget Pro"
        assert stored.price == Money.of("18.00")

    def test_delete_is_idempotent(self):
        service, repo = _setup()
        service.delete_product(1)
        service.delete_product(1)
        assert repo.get_by_id(1) is None
        assert len(repo.list_all()) == 1
