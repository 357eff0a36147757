"""Application service: Add Customer use case."""

from __future__ import annotations

import logging

from retail.domain.exceptions import ValidationError
from retail.domain.model.customer import Customer
from retail.domain.repository.customer_directory import CustomerDirectory

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(self, directory: CustomerDirectory) -> None:
        self._directory = directory

    def handle(self, customer_id: int, name: str, email: str) -> Customer:
        """Register a new customer."""
        if not name or not name.strip():
            raise ValidationError("Customer name is required")

        customer = Customer(id=customer_id, name=name.strip(), email=email.strip())
        self._directory.add(customer)
        logger.info("Added customer #%s '%s'", customer.id, customer.name)
        return customer
