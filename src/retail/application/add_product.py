"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from retail.domain.exceptions import InvalidQuantityError, ValidationError
from retail.domain.model.category import Category
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        product_id: int,
        name: str,
        price: str,
        quantity: int = 0,
        category: Category | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if quantity < 0:
            raise InvalidQuantityError(f"Invalid quantity: {quantity}")

        product = Product(
            id=product_id,
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
            category=category,
        )
        self._catalog.add(product)
        logger.info("Added product #%s '%s' at %s", product.id, product.name, product.price)
        return product
