"""Plain-text inventory listing."""

from __future__ import annotations

from retail.domain.model.product import Product


def render_inventory(products: list[Product]) -> str:
    if not products:
        return "Inventory is empty.\n"

    lines = [
        f"Product ID: {p.id}, Name: {p.name}, Category: {p.category_name or 'None'}, "
        f"Price: {p.price}, Quantity: {p.quantity}"
        for p in products
    ]
    lines.append("-" * 26)
    return "\n".join(lines) + "\n"
