"""Purchase history: the append-only log of a customer's purchases."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from retail.domain.model.value_objects import Money


@dataclass(frozen=True)
class PurchaseRecord:
    """One completed purchase, captured at transaction time."""

    product_name: str
    quantity: int
    total_cost: Money


@dataclass
class PurchaseHistory:
    """Chronological sequence of purchase records.

    Records can only be appended; there is no way to edit or remove
    one once it has been added.
    """

    _records: list[PurchaseRecord] = field(default_factory=list)

    def add_purchase(self, product_name: str, quantity: int, total_cost: Money) -> PurchaseRecord:
        record = PurchaseRecord(
            product_name=product_name, quantity=quantity, total_cost=total_cost
        )
        self._records.append(record)
        return record

    @property
    def records(self) -> list[PurchaseRecord]:
        """A copy of the records, oldest first."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PurchaseRecord]:
        return iter(list(self._records))
