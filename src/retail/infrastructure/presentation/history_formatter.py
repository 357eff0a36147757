"""Formatting of a customer's purchase history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail.domain.model.purchase_history import PurchaseRecord


class PurchaseHistoryFormatter(ABC):

    @abstractmethod
    def format_history(self, history: list[PurchaseRecord]) -> str:
        """Render the records, oldest first."""


class PlainTextPurchaseHistoryFormatter(PurchaseHistoryFormatter):

    def format_history(self, history: list[PurchaseRecord]) -> str:
        if not history:
            return "No purchase history found.\n"
        return "".join(
            f"  - Bought {r.quantity} {r.product_name} for {r.total_cost}\n"
            for r in history
        )
