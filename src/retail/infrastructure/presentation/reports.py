"""Text reports over the catalog and the customer directory.

Reports are read-only observers of core state. A failure for one
customer is reported inline and does not abort the rest of the report.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from retail.domain.exceptions import EntityNotFoundError
from retail.domain.repository.customer_directory import CustomerDirectory
from retail.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class Report(ABC):

    @abstractmethod
    def generate(self) -> str:
        """Return the full report text."""


class SalesReport(Report):

    def __init__(self, directory: CustomerDirectory) -> None:
        self._directory = directory

    def generate(self) -> str:
        lines = ["Sales Report:"]
        for customer_id, customer in self._directory.list_all():
            lines.append(f"Customer: {customer.name} (ID: {customer_id})")
            try:
                purchases = self._directory.history_of(customer_id)
            except EntityNotFoundError as exc:
                logger.warning("No history for customer #%s: %s", customer_id, exc)
                lines.append(f"  Error retrieving purchase history: {exc}")
                continue

            if not purchases:
                lines.append("  No purchases found.")
            for purchase in purchases:
                lines.append(
                    f"  - Bought {purchase.quantity} {purchase.product_name} "
                    f"for {purchase.total_cost}"
                )
        return "\n".join(lines) + "\n"


class InventoryReport(Report):

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def generate(self) -> str:
        lines = ["Inventory Report:"]
        products = self._catalog.list_all()
        if not products:
            lines.append("No products in inventory.")
        for product in products:
            lines.append(
                f"- Product: {product.name}, Price: {product.price}, "
                f"Quantity: {product.quantity}"
            )
        return "\n".join(lines) + "\n"


REPORT_KINDS = ("inventory", "sales")


def report_for(kind: str, catalog: ProductCatalog, directory: CustomerDirectory) -> Report:
    """Pick a report by its configured name."""
    kind = kind.strip().lower()
    if kind == "sales":
        return SalesReport(directory)
    if kind == "inventory":
        return InventoryReport(catalog)
    raise ValueError(
        f"Unknown report kind '{kind}'. Expected one of: {', '.join(REPORT_KINDS)}"
    )
