"""Receipt rendering for completed purchases.

Receipts only read a TransactionResult; they never touch the catalog
or the directory.
"""

from __future__ import annotations

import html
from abc import ABC, abstractmethod

from retail.domain.service.transaction_processor import TransactionResult


class ReceiptFormat(ABC):

    @abstractmethod
    def render(self, result: TransactionResult) -> str:
        """Return the receipt for *result* as a string."""


class TextReceiptFormat(ReceiptFormat):

    def render(self, result: TransactionResult) -> str:
        return (
            "\n--- Receipt ---\n"
            f"Customer: {result.customer_name}\n"
            f"Product: {result.product_name}\n"
            f"Quantity: {result.quantity}\n"
            f"Total Cost: {result.total_cost}\n"
            "-----------------\n\n"
        )


class HTMLReceiptFormat(ReceiptFormat):

    def render(self, result: TransactionResult) -> str:
        customer = html.escape(result.customer_name)
        product = html.escape(result.product_name)
        return (
            "<html>\n<head><title>Receipt</title></head>\n<body>\n"
            "<h1>Receipt</h1>\n"
            f"<p><strong>Customer:</strong> {customer}</p>\n"
            f"<p><strong>Product:</strong> {product}</p>\n"
            f"<p><strong>Quantity:</strong> {result.quantity}</p>\n"
            f"<p><strong>Total Cost:</strong> {result.total_cost}</p>\n"
            "</body>\n</html>\n"
        )


RECEIPT_FORMATS: dict[str, type[ReceiptFormat]] = {
    "text": TextReceiptFormat,
    "html": HTMLReceiptFormat,
}


def receipt_format_for(name: str) -> ReceiptFormat:
    """Pick a receipt format by its configured name."""
    try:
        return RECEIPT_FORMATS[name.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown receipt format '{name}'. Expected one of: "
            f"{', '.join(sorted(RECEIPT_FORMATS))}"
        ) from None


def render_transaction_details(result: TransactionResult) -> str:
    return (
        "Transaction Details:\n"
        f"  Customer: {result.customer_name} (ID: {result.customer_id})\n"
        f"  Product: {result.product_name} (ID: {result.product_id})\n"
        f"  Original Price: {result.original_price}\n"
        f"  Discounted Price: {result.unit_price}\n"
        f"  Quantity: {result.quantity}\n"
        f"  Total Cost: {result.total_cost}\n"
    )
