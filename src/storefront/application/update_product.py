"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from storefront.application.dto import ProductDTO, ProductInput
from storefront.application.pricing import discounted_price
from storefront.application.product_service import ProductService
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.service.discount_policy import DiscountPolicyEvaluator

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        service: ProductService,
        evaluator: DiscountPolicyEvaluator,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._service = service
        self._evaluator = evaluator
        self._clock = clock

    def handle(self, product_id: int, data: ProductInput) -> ProductDTO:
        """Overwrite name and price of an existing product.

        The discount policy is applied to the new price. A missing
        product raises instead of being created.
        """
        product = self._service.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        price = discounted_price(self._evaluator, self._clock(), data.price)
        product.revise(data.name, price)
        self._service.update_product(product.id, product.name, product.price)
        logger.info("Updated product #%s '%s' to %s", product.id, product.name, product.price)
        return ProductDTO.from_product(product)
