"""In-memory product catalog.

The catalog exclusively owns every Product it holds, together with the
discount assigned to each one. Nothing is persisted; state lives for
the lifetime of the process.
"""

from __future__ import annotations

from retail.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from retail.domain.model.discount import Discount
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money


class ProductCatalog:

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[int, Product] = {}
        self._discounts: dict[int, Discount] = {}
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> None:
        """Register a new product. IDs must be unique."""
        if product.id in self._products:
            raise DuplicateKeyError(f"Product with ID {product.id} already exists")
        self._products[product.id] = product

    def get(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with ID: {product_id}")
        return product

    def list_all(self) -> list[Product]:
        """Return every product, in the order they were added."""
        return list(self._products.values())

    def by_category(self, category_id: int) -> list[Product]:
        """Return products tagged with *category_id*; untagged ones are skipped."""
        return [
            p for p in self._products.values()
            if p.category is not None and p.category.id == category_id
        ]

    # --- Discounts ------------------------------------------------------------

    def set_discount(self, product_id: int, discount: Discount) -> None:
        """Assign *discount* to a product, replacing any earlier assignment."""
        if product_id not in self._products:
            raise EntityNotFoundError(
                f"Cannot apply discount: product {product_id} not found"
            )
        self._discounts[product_id] = discount

    def discount_for(self, product_id: int) -> Discount:
        self.get(product_id)
        return self._discounts.get(product_id, Discount.none())

    def discounted_price(self, product_id: int) -> Money:
        """Current unit price of a product after its discount."""
        product = self.get(product_id)
        discount = self._discounts.get(product_id)
        if discount is None:
            return product.price
        return discount.apply(product.price)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __len__(self) -> int:
        return len(self._products)
