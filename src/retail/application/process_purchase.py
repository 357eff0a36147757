"""Application service: Process Purchase use case.

Runs a single purchase through the TransactionProcessor and maps the
result to a DTO. Domain errors propagate to the caller untouched.
"""

from __future__ import annotations

import logging

from retail.application.dto import PurchaseDTO
from retail.domain.exceptions import DomainException
from retail.domain.service.transaction_processor import (
    TransactionProcessor,
    TransactionResult,
)

logger = logging.getLogger(__name__)


class ProcessPurchaseHandler:

    def __init__(self, processor: TransactionProcessor) -> None:
        self._processor = processor

    def handle(self, customer_id: int, product_id: int, quantity: int) -> PurchaseDTO:
        return self.to_dto(self.execute(customer_id, product_id, quantity))

    def execute(self, customer_id: int, product_id: int, quantity: int) -> TransactionResult:
        """Process the purchase and return the raw domain result."""
        try:
            result = self._processor.process(customer_id, product_id, quantity)
        except DomainException as exc:
            logger.warning(
                "Purchase rejected (customer=%s product=%s qty=%s): %s",
                customer_id, product_id, quantity, exc,
            )
            raise

        logger.info(
            "Customer #%s bought %s x %s for %s",
            result.customer_id, result.quantity, result.product_name, result.total_cost,
        )
        return result

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def to_dto(result: TransactionResult) -> PurchaseDTO:
        return PurchaseDTO(
            customer_id=result.customer_id,
            customer_name=result.customer_name,
            product_id=result.product_id,
            product_name=result.product_name,
            quantity=result.quantity,
            original_price=str(result.original_price),
            unit_price=str(result.unit_price),
            total_cost=str(result.total_cost),
        )
