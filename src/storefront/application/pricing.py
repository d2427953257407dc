"""Discount application shared by the create and update use cases."""

from __future__ import annotations

import logging
from datetime import date

from storefront.domain.model.value_objects import Money
from storefront.domain.service.discount_policy import DiscountPolicyEvaluator

logger = logging.getLogger(__name__)


def discounted_price(
    evaluator: DiscountPolicyEvaluator, today: date, price: Money
) -> Money:
    adjusted = evaluator.evaluate(today, price)
    if adjusted != price:
        logger.info(
            "Discount %s applied on %s: %s -> %s",
            ", ".join(evaluator.applicable_rules(today)),
            today.isoformat(),
            price,
            adjusted,
        )
    return adjusted
