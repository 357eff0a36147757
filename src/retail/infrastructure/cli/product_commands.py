"""CLI commands for products and inventory."""

from __future__ import annotations

import click

from retail.application.show_inventory import ShowInventoryHandler
from retail.application.update_product import UpdateProductHandler
from retail.domain.exceptions import DomainException
from retail.infrastructure.bootstrap import demo_engine


@click.command("list")
@click.option("--category", "category_id", type=int, default=None, help="Only this category ID.")
def product_list(category_id: int | None) -> None:
    """List all products with their discounted prices."""
    handler = ShowInventoryHandler(demo_engine().catalog)
    lines = handler.handle(category_id=category_id)

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10} {'Discount':>12} {'Now':>10} {'Qty':>6}")
    click.echo("-" * 84)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.name:<20} {line.category:<14} {line.price:>10} "
            f"{line.discount:>12} {line.discounted_price:>10} {line.quantity:>6}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--quantity", default=None, type=int, help="New stock level.")
def product_update(product_id: int, price: str | None, quantity: int | None) -> None:
    """Update a product's price and/or stock level.

    Changes apply to a freshly seeded demo store and are not kept
    after the command exits.
    """
    handler = UpdateProductHandler(demo_engine().catalog)

    try:
        product = handler.handle(product_id, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' now at {product.price}, "
        f"{product.quantity} in stock"
    )
