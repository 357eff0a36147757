"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from retail.application.dto import InventoryLineDTO
from retail.domain.repository.product_catalog import ProductCatalog


class ShowInventoryHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, category_id: int | None = None) -> list[InventoryLineDTO]:
        if category_id is None:
            products = self._catalog.list_all()
        else:
            products = self._catalog.by_category(category_id)

        return [
            InventoryLineDTO(
                product_id=p.id,
                name=p.name,
                category=p.category_name or "None",
                price=str(p.price),
                discounted_price=str(self._catalog.discounted_price(p.id)),
                discount=str(self._catalog.discount_for(p.id)),
                quantity=p.quantity,
            )
            for p in products
        ]
