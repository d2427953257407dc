"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import calendar
import logging

from storefront.application.product_service import ProductService
from storefront.domain.service.discount_policy import (
    DiscountPolicyEvaluator,
    FixedDateRule,
    PercentageDiscount,
    WeeklyRule,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.sqlite_product_repository import (
    SqliteProductRepository,
)

# Black Friday promotion date.
FIXED_DISCOUNT_MONTH = 11
FIXED_DISCOUNT_DAY = 24
# Weekly market-day discount.
WEEKLY_DISCOUNT_WEEKDAY = calendar.SATURDAY

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


def product_repository(settings: Settings) -> SqliteProductRepository:
    return SqliteProductRepository(settings.database)


def product_service(settings: Settings) -> ProductService:
    return ProductService(product_repository(settings))


def discount_policy(settings: Settings) -> DiscountPolicyEvaluator:
    return DiscountPolicyEvaluator(
        {
            "black_friday": FixedDateRule(
                FIXED_DISCOUNT_MONTH,
                FIXED_DISCOUNT_DAY,
                PercentageDiscount(settings.fixed_date_discount_rate),
            ),
            "weekly": WeeklyRule(
                WEEKLY_DISCOUNT_WEEKDAY,
                PercentageDiscount(settings.weekly_discount_rate),
            ),
        }
    )
