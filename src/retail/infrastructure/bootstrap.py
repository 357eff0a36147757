"""Composition root: wires the catalog, directory and processor together.

This is the only place in the codebase that knows about *all* layers.
There are no global instances: every caller builds its own Engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from retail.application.add_customer import AddCustomerHandler
from retail.application.add_product import AddProductHandler
from retail.application.set_discount import SetDiscountHandler
from retail.domain.model.category import Category
from retail.domain.repository.customer_directory import CustomerDirectory
from retail.domain.repository.product_catalog import ProductCatalog
from retail.domain.service.transaction_processor import TransactionProcessor

ELECTRONICS = Category(1, "Electronics")
ACCESSORIES = Category(2, "Accessories")


@dataclass(frozen=True)
class Engine:
    catalog: ProductCatalog
    directory: CustomerDirectory
    processor: TransactionProcessor


def build_engine() -> Engine:
    catalog = ProductCatalog()
    directory = CustomerDirectory()
    return Engine(
        catalog=catalog,
        directory=directory,
        processor=TransactionProcessor(catalog, directory),
    )


def seed_demo_data(engine: Engine) -> Engine:
    """Load the demo store: two products, two customers, two discounts."""
    products = AddProductHandler(engine.catalog)
    products.handle(101, "Laptop", "1500.00", quantity=10, category=ELECTRONICS)
    products.handle(102, "Mouse", "25.00", quantity=50, category=ACCESSORIES)

    customers = AddCustomerHandler(engine.directory)
    customers.handle(1, "Alice Johnson", "alice.johnson@example.com")
    customers.handle(2, "Bob Smith", "bob.smith@example.com")

    discounts = SetDiscountHandler(engine.catalog)
    discounts.handle(101, "percentage", "10")
    discounts.handle(102, "flat", "5")
    return engine


def demo_engine() -> Engine:
    return seed_demo_data(build_engine())
