"""Discount value object: a pricing rule applied to a base price."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from retail.domain.exceptions import InvalidDiscountError
from retail.domain.model.value_objects import Money


class DiscountKind(Enum):
    NONE = "none"
    FLAT = "flat"
    PERCENTAGE = "percentage"

    @classmethod
    def parse(cls, raw: str | DiscountKind) -> DiscountKind:
        """Resolve a kind from its string tag (case-insensitive)."""
        if isinstance(raw, DiscountKind):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError as exc:
            raise InvalidDiscountError(f"Invalid discount type: {raw!r}") from exc


@dataclass(frozen=True)
class Discount:
    """A (kind, value) pair.

    For ``FLAT`` the value is a currency amount; for ``PERCENTAGE`` it is
    a percentage, conceptually 0-100 but not enforced. Any result that
    would drop below zero is clamped to zero.
    """

    kind: DiscountKind
    value: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        # Accept raw tags and numbers so callers can build from user input.
        object.__setattr__(self, "kind", DiscountKind.parse(self.kind))
        if not isinstance(self.value, Decimal):
            try:
                object.__setattr__(self, "value", Decimal(str(self.value)))
            except (InvalidOperation, ValueError) as exc:
                raise InvalidDiscountError(
                    f"Invalid discount value: {self.value!r}"
                ) from exc
        if not self.value.is_finite():
            raise InvalidDiscountError(f"Invalid discount value: {self.value!r}")

    def apply(self, base_price: Money) -> Money:
        """Return *base_price* adjusted by this discount."""
        if self.kind is DiscountKind.NONE:
            return base_price
        if self.kind is DiscountKind.FLAT:
            return base_price.minus_clamped(self.value)
        if self.kind is DiscountKind.PERCENTAGE:
            return base_price.scaled(1 - self.value / Decimal("100"))
        raise InvalidDiscountError(f"Invalid discount type: {self.kind!r}")

    def __str__(self) -> str:
        if self.kind is DiscountKind.FLAT:
            return f"${self.value:.2f} off"
        if self.kind is DiscountKind.PERCENTAGE:
            return f"{self.value.normalize():f}% off"
        return "no discount"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def none() -> Discount:
        return Discount(DiscountKind.NONE)

    @staticmethod
    def flat(value: str | float | int | Decimal) -> Discount:
        return Discount(DiscountKind.FLAT, value)

    @staticmethod
    def percentage(value: str | float | int | Decimal) -> Discount:
        return Discount(DiscountKind.PERCENTAGE, value)
