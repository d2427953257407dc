"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that discounts computed as a fraction of a price
    come out to exact cents instead of float approximations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def minus_clamped(self, other: Money) -> Money:
        """Subtract ``other``, bottoming out at zero instead of raising."""
        if other.amount >= self.amount:
            return Money.zero()
        return self - other

    def scaled(self, rate: Decimal) -> Money:
        """Return ``amount * rate`` rounded half-up to the cent."""
        if not isinstance(rate, Decimal):
            raise TypeError(f"Can only scale Money by Decimal, got {type(rate).__name__}")
        return Money((self.amount * rate).quantize(CENT, rounding=ROUND_HALF_UP))

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def __float__(self) -> float:
        return float(self.amount)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class DiscountRate:
    """Fraction of a price to subtract, between 0 and 1 inclusive."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Discount rate must be a Decimal, got {type(self.value).__name__}"
            )
        if not Decimal("0") <= self.value <= Decimal("1"):
            raise ValidationError(
                f"Discount rate must be between 0 and 1, got {self.value}"
            )

    def __str__(self) -> str:
        return f"{self.value * 100:.2f}%"

    @staticmethod
    def of(value: str | float | Decimal) -> DiscountRate:
        try:
            return DiscountRate(Decimal(str(value)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid discount rate: {value!r}") from exc
