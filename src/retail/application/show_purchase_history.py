"""Application service: Show Purchase History use case (query)."""

from __future__ import annotations

from retail.application.dto import PurchaseRecordDTO
from retail.domain.repository.customer_directory import CustomerDirectory


class ShowPurchaseHistoryHandler:

    def __init__(self, directory: CustomerDirectory) -> None:
        self._directory = directory

    def handle(self, customer_id: int) -> list[PurchaseRecordDTO]:
        return [
            PurchaseRecordDTO(
                product_name=record.product_name,
                quantity=record.quantity,
                total_cost=str(record.total_cost),
            )
            for record in self._directory.history_of(customer_id)
        ]
