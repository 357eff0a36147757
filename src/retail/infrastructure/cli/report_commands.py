"""CLI commands for reports, inventory display and the demo run."""

from __future__ import annotations

import click

from retail.application.process_purchase import ProcessPurchaseHandler
from retail.domain.exceptions import DomainException
from retail.infrastructure.bootstrap import demo_engine
from retail.infrastructure.config.settings import settings
from retail.infrastructure.presentation.history_formatter import (
    PlainTextPurchaseHistoryFormatter,
)
from retail.infrastructure.presentation.inventory_view import render_inventory
from retail.infrastructure.presentation.receipts import (
    RECEIPT_FORMATS,
    receipt_format_for,
    render_transaction_details,
)
from retail.infrastructure.presentation.reports import REPORT_KINDS, report_for

# (customer_id, product_id, quantity)
DEMO_PURCHASES = [(1, 101, 2), (2, 102, 3)]


@click.command("report")
@click.option(
    "--kind",
    type=click.Choice(REPORT_KINDS, case_sensitive=False),
    default=lambda: settings.REPORT_KIND,
    show_default="from RETAIL_REPORT_KIND",
    help="Which report to generate.",
)
def report(kind: str) -> None:
    """Generate a report over the demo store."""
    engine = demo_engine()
    click.echo(report_for(kind, engine.catalog, engine.directory).generate(), nl=False)


@click.command("inventory")
def inventory() -> None:
    """Display the demo store's inventory."""
    click.echo(render_inventory(demo_engine().catalog.list_all()), nl=False)


@click.command("demo")
@click.option(
    "--receipt",
    type=click.Choice(sorted(RECEIPT_FORMATS), case_sensitive=False),
    default=lambda: settings.RECEIPT_FORMAT,
    help="Receipt format.",
)
@click.option(
    "--report",
    "report_kind",
    type=click.Choice(REPORT_KINDS, case_sensitive=False),
    default=lambda: settings.REPORT_KIND,
    help="Report printed at the end.",
)
def demo(receipt: str, report_kind: str) -> None:
    """Run the full demo: purchases, inventory, histories and a report."""
    engine = demo_engine()
    receipt_format = receipt_format_for(receipt)
    handler = ProcessPurchaseHandler(engine.processor)

    click.echo("--- Processing Transactions ---")
    for customer_id, product_id, quantity in DEMO_PURCHASES:
        try:
            result = handler.execute(customer_id, product_id, quantity)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo(render_transaction_details(result))
        click.echo(receipt_format.render(result), nl=False)

    click.echo("--- Displaying Inventory ---")
    click.echo(render_inventory(engine.catalog.list_all()), nl=False)

    click.echo("--- Displaying Purchase History ---")
    formatter = PlainTextPurchaseHistoryFormatter()
    for customer_id, customer in engine.directory.list_all():
        click.echo(f"{customer.name}'s history:")
        click.echo(formatter.format_history(engine.directory.history_of(customer_id)), nl=False)

    click.echo("--- Generating Reports ---")
    click.echo(report_for(report_kind, engine.catalog, engine.directory).generate(), nl=False)
