"""CLI commands for purchases and purchase history."""

from __future__ import annotations

import click

from retail.application.process_purchase import ProcessPurchaseHandler
from retail.application.show_purchase_history import ShowPurchaseHistoryHandler
from retail.domain.exceptions import DomainException
from retail.infrastructure.bootstrap import demo_engine
from retail.infrastructure.config.settings import settings
from retail.infrastructure.presentation.receipts import (
    RECEIPT_FORMATS,
    receipt_format_for,
    render_transaction_details,
)


@click.command("purchase")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.option(
    "--receipt",
    type=click.Choice(sorted(RECEIPT_FORMATS), case_sensitive=False),
    default=lambda: settings.RECEIPT_FORMAT,
    show_default="from RETAIL_RECEIPT_FORMAT",
    help="Receipt format.",
)
def purchase(customer_id: int, product_id: int, quantity: int, receipt: str) -> None:
    """Buy a product for a customer (against the demo store)."""
    engine = demo_engine()
    handler = ProcessPurchaseHandler(engine.processor)

    try:
        result = handler.execute(customer_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(render_transaction_details(result))
    click.echo(receipt_format_for(receipt).render(result), nl=False)


def _parse_buy(ctx, param, values):
    parsed = []
    for value in values:
        product, sep, qty = value.partition(":")
        if not sep or not product.strip().isdigit() or not qty.strip().lstrip("-").isdigit():
            raise click.BadParameter(f"expected PRODUCT_ID:QUANTITY, got {value!r}")
        parsed.append((int(product), int(qty)))
    return parsed


@click.command("history")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option(
    "--buy",
    "purchases",
    multiple=True,
    callback=_parse_buy,
    metavar="PRODUCT_ID:QUANTITY",
    help="Purchase to record first (repeatable).",
)
def history(customer_id: int, purchases: list[tuple[int, int]]) -> None:
    """Show a customer's purchase history.

    Each invocation starts from a freshly seeded demo store, so history
    only holds the purchases given with --buy in the same invocation.
    """
    engine = demo_engine()
    buyer = ProcessPurchaseHandler(engine.processor)
    handler = ShowPurchaseHistoryHandler(engine.directory)

    try:
        for product_id, quantity in purchases:
            buyer.execute(customer_id, product_id, quantity)
        records = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not records:
        click.echo("No purchase history found.")
        return

    click.echo(f"{'Product':<20} {'Qty':>5} {'Total':>12}")
    click.echo("-" * 39)
    for r in records:
        click.echo(f"{r.product_name:<20} {r.quantity:>5} {r.total_cost:>12}")
