"""Application service: Set Discount use case."""

from __future__ import annotations

import logging

from retail.domain.model.discount import Discount, DiscountKind
from retail.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class SetDiscountHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, product_id: int, kind: str, value: str = "0") -> Discount:
        """Assign a discount to a product, replacing any previous one.

        ``kind`` is one of ``none``, ``flat`` or ``percentage``.
        """
        discount = Discount(DiscountKind.parse(kind), value)
        self._catalog.set_discount(product_id, discount)
        logger.info("Product #%s now has %s", product_id, discount)
        return discount
