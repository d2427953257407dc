"""Integration tests for the Create/Update Product use cases.

Uses the in-memory fake repository and a fixed clock: no file I/O,
no dependence on the real date.
"""

import calendar
from datetime import date

import pytest

from storefront.application.create_product import CreateProductHandler
from storefront.application.dto import ProductInput
from storefront.application.product_service import ProductService
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DiscountRate, Money
from storefront.domain.service.discount_policy import (
    DiscountPolicyEvaluator,
    FixedDateRule,
    PercentageDiscount,
    WeeklyRule,
)
from tests.fakes import FakeProductRepository

BLACK_FRIDAY_WEEKDAY = date(2023, 11, 24)
BLACK_FRIDAY_SATURDAY = date(2018, 11, 24)
PLAIN_SATURDAY = date(2024, 3, 16)
PLAIN_TUESDAY = date(2024, 3, 12)


def _setup(
    today: date,
) -> tuple[CreateProductHandler, UpdateProductHandler, FakeProductRepository]:
    repo = FakeProductRepository([Product(name="Widget", price=Money.of("50.00"))])
    service = ProductService(repo)
    evaluator = DiscountPolicyEvaluator(
        {
            "black_friday": FixedDateRule(
                11, 24, PercentageDiscount(DiscountRate.of("0.10"))
            ),
            "weekly": WeeklyRule(
                calendar.SATURDAY, PercentageDiscount(DiscountRate.of("0.05"))
            ),
        }
    )
    clock = lambda: today  # noqa: E731
    return (
        CreateProductHandler(service, evaluator, clock),
        UpdateProductHandler(service, evaluator, clock),
        repo,
    )


def _input(name: str, price: str) -> ProductInput:
    return ProductInput(name=name, price=Money.of(price))


class TestCreateProduct:

    def test_price_unchanged_on_plain_day(self):
        create, _, repo = _setup(PLAIN_TUESDAY)
        dto = create.handle(_input("Gadget", "100.0"))
        assert dto.price == 100.0
        assert repo.get_by_id(dto.id).price == Money.of("100")

    def test_black_friday_discount(self):
        create, _, _ = _setup(BLACK_FRIDAY_WEEKDAY)
        assert create.handle(_input("Gadget", "100.0")).price == 90.0

    def test_weekly_discount(self):
        create, _, _ = _setup(PLAIN_SATURDAY)
        assert create.handle(_input("Gadget", "100.0")).price == 95.0

    def test_discounts_do_not_compound(self):
        create, _, _ = _setup(BLACK_FRIDAY_SATURDAY)
        assert create.handle(_input("Gadget", "100.0")).price == 85.0

    def test_assigns_sequential_ids(self):
        create, _, _ = _setup(PLAIN_TUESDAY)
        first = create.handle(_input("Gadget", "1"))
        second = create.handle(_input("Gizmo", "1"))
        assert second.id == first.id + 1

    def test_persisted_price_is_discounted(self):
        create, _, repo = _setup(PLAIN_SATURDAY)
        dto = create.handle(_input("Gadget", "20.00"))
        assert repo.get_by_id(dto.id).price == Money.of("19.00")


class TestUpdateProduct:

    def test_overwrites_name_and_price(self):
        _, update, repo = _setup(PLAIN_TUESDAY)
        dto = update.handle(1, _input("Widget Pro", "60.00"))
        assert (dto.id, dto.name, dto.price) == (1, "Widget Pro", 60.0)
        stored = repo.get_by_id(1)
        assert stored.name == "Widget Pro"
        assert stored.price == Money.of("60.00")

    def test_discount_applied_to_new_price(self):
        _, update, repo = _setup(BLACK_FRIDAY_WEEKDAY)
        dto = update.handle(1, _input("Widget", "100.0"))
        assert dto.price == 90.0
        assert repo.get_by_id(1).price == Money.of("90")

    def test_missing_product_raises_and_creates_nothing(self):
        _, update, repo = _setup(PLAIN_TUESDAY)
        with pytest.raises(EntityNotFoundError, match="#42 not found"):
            update.handle(42, _input("Ghost", "1.00"))
        assert repo.get_by_id(42) is None
        assert len(repo.list_all()) == 1

    def test_blank_name_rejected(self):
        _, update, repo = _setup(PLAIN_TUESDAY)
        with pytest.raises(ValidationError):
            update.handle(1, _input(" ", "1.00"))
        assert repo.get_by_id(1).name == "Widget"
