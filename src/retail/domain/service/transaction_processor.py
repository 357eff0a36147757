"""Domain service: Transaction Processing.

Executes a single purchase (one customer, one product, one quantity)
across the ProductCatalog and the CustomerDirectory.

The two-phase approach (validate-then-mutate) ensures a failed purchase
leaves both stock and purchase history exactly as they were.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from retail.domain.exceptions import InsufficientStockError
from retail.domain.model.value_objects import Money, Quantity
from retail.domain.repository.customer_directory import CustomerDirectory
from retail.domain.repository.product_catalog import ProductCatalog


@dataclass(frozen=True)
class TransactionResult:
    """Outcome of a completed purchase, handed to receipts and reports."""

    customer_id: int
    customer_name: str
    product_id: int
    product_name: str
    quantity: int
    unit_price: Money  # after discount
    original_price: Money
    total_cost: Money

    @property
    def savings(self) -> Money:
        per_unit = max(self.original_price.amount - self.unit_price.amount, Decimal("0"))
        return Money(per_unit * self.quantity)


class TransactionProcessor:

    def __init__(self, catalog: ProductCatalog, directory: CustomerDirectory) -> None:
        self._catalog = catalog
        self._directory = directory

    def process(self, customer_id: int, product_id: int, quantity: int) -> TransactionResult:
        """Purchase *quantity* units of a product for a customer.

        Phase 1 - validate: quantity, product, customer and stock are
                  checked and the price is computed. Nothing changes.
        Phase 2 - commit: stock is decremented and the purchase is
                  appended to the customer's history.
        """
        # Phase 1: validate
        qty = Quantity(quantity).value
        product = self._catalog.get(product_id)
        customer = self._directory.get(customer_id)

        if qty > product.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(need {qty}, have {product.quantity})"
            )

        original_price = product.price
        unit_price = self._catalog.discounted_price(product_id)
        total_cost = unit_price * qty

        # Phase 2: commit. Neither call can fail once phase 1 has passed.
        product.update_quantity(product.quantity - qty)
        self._directory.record_purchase(customer.id, product.name, qty, total_cost)

        return TransactionResult(
            customer_id=customer.id,
            customer_name=customer.name,
            product_id=product.id,
            product_name=product.name,
            quantity=qty,
            unit_price=unit_price,
            original_price=original_price,
            total_cost=total_cost,
        )
