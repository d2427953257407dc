"""Application service: Create Product use case.

Applies the discount policy for today's date to the submitted price
before the product is persisted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from storefront.application.dto import ProductDTO, ProductInput
from storefront.application.pricing import discounted_price
from storefront.application.product_service import ProductService
from storefront.domain.service.discount_policy import DiscountPolicyEvaluator

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        service: ProductService,
        evaluator: DiscountPolicyEvaluator,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._service = service
        self._evaluator = evaluator
        self._clock = clock

    def handle(self, data: ProductInput) -> ProductDTO:
        price = discounted_price(self._evaluator, self._clock(), data.price)
        product = self._service.create_product(data.name, price)
        logger.info("Created product #%s '%s' at %s", product.id, product.name, product.price)
        return ProductDTO.from_product(product)
