"""Product entity.

Products are owned by the ProductCatalog. Their price and stock level
change over time; everything else is fixed at creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from retail.domain.exceptions import InvalidQuantityError, ValidationError
from retail.domain.model.category import Category
from retail.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price updates and stock
    movements are legitimate mutations. Both go through ``update_*``
    methods that reject negative values and leave the product
    untouched on rejection.
    """

    id: int
    name: str
    price: Money
    quantity: int = 0
    category: Category | None = None

    def __post_init__(self) -> None:
        self.price = _coerce_price(self.price)
        if self.quantity < 0:
            raise InvalidQuantityError(
                f"Stock quantity cannot be negative, got {self.quantity}"
            )

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category is not None else None

    def update_price(self, new_price: Money | str | float | int | Decimal) -> None:
        """Change the product price. Zero is allowed, negative is not."""
        self.price = _coerce_price(new_price)

    def update_quantity(self, new_quantity: int) -> None:
        """Set the on-hand stock level."""
        if new_quantity < 0:
            raise InvalidQuantityError(
                f"Invalid quantity for {self.name}: {new_quantity}"
            )
        self.quantity = new_quantity

    def assign_category(self, category: Category | None) -> None:
        self.category = category


def _coerce_price(raw: Money | str | float | int | Decimal) -> Money:
    if isinstance(raw, Money):
        return raw
    try:
        amount = Decimal(str(raw))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {raw!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid money amount: {raw!r}")
    if amount < 0:
        raise InvalidQuantityError(f"Invalid price: {raw}")
    return Money(amount)
