"""In-memory customer directory.

Owns every Customer and the PurchaseHistory belonging to each one.
A history is created as soon as the customer is registered, so a known
customer with no purchases yields an empty history rather than an error.
"""

from __future__ import annotations

from retail.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from retail.domain.model.customer import Customer
from retail.domain.model.purchase_history import PurchaseHistory, PurchaseRecord
from retail.domain.model.value_objects import Money


class CustomerDirectory:

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._customers: dict[int, Customer] = {}
        self._histories: dict[int, PurchaseHistory] = {}
        for customer in customers or []:
            self.add(customer)

    def add(self, customer: Customer) -> None:
        if customer.id in self._customers:
            raise DuplicateKeyError(f"Customer with ID {customer.id} already exists")
        self._customers[customer.id] = customer
        self._histories.setdefault(customer.id, PurchaseHistory())

    def get(self, customer_id: int) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer not found with ID: {customer_id}")
        return customer

    def list_all(self) -> list[tuple[int, Customer]]:
        return list(self._customers.items())

    def record_purchase(
        self,
        customer_id: int,
        product_name: str,
        quantity: int,
        total_cost: Money,
    ) -> PurchaseRecord:
        """Append a completed purchase to the customer's history."""
        if customer_id not in self._customers:
            raise EntityNotFoundError(
                f"Cannot add purchase: customer {customer_id} not found"
            )
        history = self._histories.setdefault(customer_id, PurchaseHistory())
        return history.add_purchase(product_name, quantity, total_cost)

    def history_of(self, customer_id: int) -> list[PurchaseRecord]:
        """Purchase records for a customer, oldest first.

        Empty for a known customer who has not bought anything yet;
        EntityNotFoundError is reserved for unknown customer IDs.
        """
        self.get(customer_id)
        history = self._histories.get(customer_id)
        return history.records if history is not None else []

    def __contains__(self, customer_id: object) -> bool:
        return customer_id in self._customers

    def __len__(self) -> int:
        return len(self._customers)
