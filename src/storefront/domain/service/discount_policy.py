"""Domain service: Discount Policy.

Calendar-based price adjustments applied when a product is created or
updated. A rule pairs a date predicate with a discount strategy; the
evaluator runs every configured rule against the same original price
and subtracts the sum of the triggered discounts.

Discounts do NOT compound: on a day where two rules fire, a price ``p``
becomes ``p - d1(p) - d2(p)``, never ``d2`` applied to ``p - d1(p)``.
"""

from __future__ import annotations

import calendar
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import date

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import DiscountRate, Money

# --- Strategies ---------------------------------------------------------------


class DiscountStrategy(ABC):
    """Computes the amount to subtract from a price."""

    @abstractmethod
    def discount_for(self, price: Money) -> Money: ...


class PercentageDiscount(DiscountStrategy):

    def __init__(self, rate: DiscountRate) -> None:
        self.rate = rate

    def discount_for(self, price: Money) -> Money:
        return price.scaled(self.rate.value)

    def __repr__(self) -> str:
        return f"PercentageDiscount({self.rate})"


class FlatDiscount(DiscountStrategy):

    def __init__(self, amount: Money) -> None:
        self.amount = amount

    def discount_for(self, price: Money) -> Money:
        return self.amount

    def __repr__(self) -> str:
        return f"FlatDiscount({self.amount})"


# --- Rules --------------------------------------------------------------------


class DiscountRule(ABC):
    """A discount strategy gated by a date predicate."""

    def __init__(self, strategy: DiscountStrategy) -> None:
        self.strategy = strategy

    @abstractmethod
    def applies_on(self, day: date) -> bool: ...

    def discount_for(self, day: date, price: Money) -> Money:
        if not self.applies_on(day):
            return Money.zero()
        return self.strategy.discount_for(price)


class FixedDateRule(DiscountRule):
    """Fires once a year on a given month and day (e.g. November 24)."""

    def __init__(self, month: int, day: int, strategy: DiscountStrategy) -> None:
        super().__init__(strategy)
        if not 1 <= month <= 12:
            raise ValidationError(f"Invalid month: {month}")
        # 2000 is a leap year, so Feb 29 is accepted
        if not 1 <= day <= calendar.monthrange(2000, month)[1]:
            raise ValidationError(f"Invalid day {day} for month {month}")
        self.month = month
        self.day = day

    def applies_on(self, day: date) -> bool:
        return day.month == self.month and day.day == self.day


class WeeklyRule(DiscountRule):
    """Fires every week on a given weekday (``calendar.SATURDAY`` etc.)."""

    def __init__(self, weekday: int, strategy: DiscountStrategy) -> None:
        super().__init__(strategy)
        if not calendar.MONDAY <= weekday <= calendar.SUNDAY:
            raise ValidationError(f"Invalid weekday: {weekday}")
        self.weekday = weekday

    def applies_on(self, day: date) -> bool:
        return day.weekday() == self.weekday


# --- Evaluator ----------------------------------------------------------------


class DiscountPolicyEvaluator:
    """Applies every configured rule independently to a base price."""

    def __init__(self, rules: Mapping[str, DiscountRule]) -> None:
        self._rules = dict(rules)

    def applicable_rules(self, current_date: date) -> list[str]:
        """Names of the rules that fire on ``current_date``, in configured order."""
        return [
            name for name, rule in self._rules.items() if rule.applies_on(current_date)
        ]

    def evaluate(self, current_date: date, price: Money) -> Money:
        """Return ``price`` minus every triggered discount, never below zero.

        Each discount is computed from the original ``price``.
        """
        total = Money.zero()
        for rule in self._rules.values():
            total = total + rule.discount_for(current_date, price)
        return price.minus_clamped(total)
