import click

from sales.domain.exceptions import DomainException
from sales.infrastructure.cli.client_commands import client_register, client_show
from sales.infrastructure.cli.context import CliContext
from sales.infrastructure.cli.order_commands import (
    order_add_product,
    order_confirm,
    order_create,
    order_offer,
    order_show,
)
from sales.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_restore,
    product_update,
    product_withdraw,
)
from sales.infrastructure.config import Settings
from sales.infrastructure.logging import configure_logging


@click.group()
@click.option("--user", "user_id", default=None, help="Acting user id (defaults to SALES_USER).")
@click.pass_context
def cli(ctx: click.Context, user_id: str | None) -> None:
    """Sales: reserve products, get an offer, confirm the order."""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings)
    ctx.obj = CliContext(settings=settings, user_id=user_id or settings.current_user)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def client() -> None:
    """Manage clients."""


# Register subcommands
order.add_command(order_add_product)
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_offer)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_restore)
product.add_command(product_update)
product.add_command(product_withdraw)
client.add_command(client_register)
client.add_command(client_show)
