"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from retail.domain.exceptions import InvalidQuantityError, ValidationError
from retail.domain.model.product import Product
from retail.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        product_id: int,
        price: str | None = None,
        quantity: int | None = None,
    ) -> Product:
        """Update a product's price and/or stock level.

        Both values are validated before either is applied, so a bad
        quantity never leaves a half-updated product behind.
        """
        if price is None and quantity is None:
            raise ValidationError("Nothing to update: give a price or a quantity")

        product = self._catalog.get(product_id)

        if quantity is not None and quantity < 0:
            raise InvalidQuantityError(f"Invalid quantity for {product.name}: {quantity}")
        if price is not None:
            product.update_price(price)
        if quantity is not None:
            product.update_quantity(quantity)

        logger.info(
            "Updated product #%s: price=%s quantity=%s",
            product.id, product.price, product.quantity,
        )
        return product
