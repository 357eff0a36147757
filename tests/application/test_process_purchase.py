"""Integration tests for the ProcessPurchase use case.

Uses the in-memory catalog and directory: no I/O.
"""

import logging

import pytest

from retail.application.process_purchase import ProcessPurchaseHandler
from retail.application.show_purchase_history import ShowPurchaseHistoryHandler
from retail.domain.exceptions import EntityNotFoundError, InsufficientStockError
from retail.domain.service.transaction_processor import TransactionProcessor
from tests.fakes import make_catalog, make_directory


def _setup():
    catalog = make_catalog()
    directory = make_directory()
    handler = ProcessPurchaseHandler(TransactionProcessor(catalog, directory))
    return handler, catalog, directory


class TestProcessPurchaseHappyPath:

    def test_returns_formatted_dto(self):
        handler, _, _ = _setup()
        dto = handler.handle(customer_id=1, product_id=101, quantity=2)
        assert dto.customer_name == "Alice Johnson"
        assert dto.product_name == "Laptop"
        assert dto.original_price == "$1500.00"
        assert dto.unit_price == "$1350.00"
        assert dto.total_cost == "$2700.00"

    def test_history_visible_through_query(self):
        handler, _, directory = _setup()
        handler.handle(2, 102, 3)
        records = ShowPurchaseHistoryHandler(directory).handle(2)
        assert len(records) == 1
        assert (records[0].product_name, records[0].quantity, records[0].total_cost) == (
            "Mouse", 3, "$60.00",
        )

    def test_logs_completed_purchase(self, caplog):
        handler, _, _ = _setup()
        with caplog.at_level(logging.INFO, logger="retail.application.process_purchase"):
            handler.handle(2, 102, 3)
        assert "bought 3 x Mouse for $60.00" in caplog.text


class TestProcessPurchaseFailures:

    def test_insufficient_stock_propagates(self):
        handler, catalog, directory = _setup()
        with pytest.raises(InsufficientStockError):
            handler.handle(1, 101, 50)
        assert catalog.get(101).quantity == 10
        assert directory.history_of(1) == []

    def test_rejection_is_logged_as_warning(self, caplog):
        handler, _, _ = _setup()
        with caplog.at_level(logging.WARNING, logger="retail.application.process_purchase"):
            with pytest.raises(EntityNotFoundError):
                handler.handle(1, 999, 1)
        assert any(r.levelno == logging.WARNING for r in caplog.records)
        assert "Purchase rejected" in caplog.text

    def test_history_for_unknown_customer(self):
        _, _, directory = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowPurchaseHistoryHandler(directory).handle(42)
