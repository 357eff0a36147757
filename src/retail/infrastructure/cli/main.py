import click

from retail.infrastructure.cli.product_commands import product_list, product_update
from retail.infrastructure.cli.purchase_commands import history, purchase
from retail.infrastructure.cli.report_commands import demo, inventory, report
from retail.infrastructure.logger_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG, WARNING).")
def cli(log_level: str | None) -> None:
    """Retail - transaction engine over an in-memory demo store"""
    setup_logging(log_level)


@cli.group()
def product() -> None:
    """Browse and update products."""


# Register subcommands
cli.add_command(demo)
cli.add_command(history)
cli.add_command(inventory)
cli.add_command(purchase)
cli.add_command(report)
product.add_command(product_list)
product.add_command(product_update)
