"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PurchaseDTO:
    """Output: a completed purchase as displayed to the user."""

    customer_id: int
    customer_name: str
    product_id: int
    product_name: str
    quantity: int
    original_price: str  # formatted, e.g. "$1500.00"
    unit_price: str
    total_cost: str


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one product row of the inventory listing."""

    product_id: int
    name: str
    category: str
    price: str
    discounted_price: str
    discount: str
    quantity: int


@dataclass(frozen=True)
class PurchaseRecordDTO:
    """Output: one entry of a customer's purchase history."""

    product_name: str
    quantity: int
    total_cost: str
