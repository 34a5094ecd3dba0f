"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from sales.application.add_catalog_product import AddCatalogProductHandler
from sales.application.update_product import UpdateProductHandler
from sales.domain.exceptions import DomainException
from sales.domain.model.value_objects import AggregateId
from sales.infrastructure import bootstrap
from sales.infrastructure.cli.context import CliContext


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", default="general", show_default=True, help="Product category.")
@click.pass_obj
def product_add(ctx: CliContext, name: str, price: str, category: str) -> None:
    """Add a new product to the catalog."""
    handler = AddCatalogProductHandler(uow=ctx.unit_of_work())

    try:
        product = handler.handle(name=name, price=price, category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(ctx: CliContext) -> None:
    """List all products in the catalog."""
    products = bootstrap.product_repository(ctx.settings).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Category':<12} {'Price':>10} {'Available':>10}")
    click.echo("-" * 90)
    for p in products:
        click.echo(
            f"{p.id.value:<34} {p.name:<20} {p.category:<12} {str(p.price):>10} "
            f"{'yes' if p.is_available() else 'no':>10}"
        )


def _update(ctx: CliContext, product_id: str, **changes) -> None:
    handler = UpdateProductHandler(uow=ctx.unit_of_work())
    try:
        handler.handle(AggregateId(product_id), **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(ctx: CliContext, product_id: str, price: str) -> None:
    """Update a product's price."""
    _update(ctx, product_id, new_price=price)
    click.echo(f"Product {product_id} price updated to ${price}")


@click.command("withdraw")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_withdraw(ctx: CliContext, product_id: str) -> None:
    """Mark a product as unavailable."""
    _update(ctx, product_id, available=False)
    click.echo(f"Product {product_id} withdrawn.")


@click.command("restore")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_restore(ctx: CliContext, product_id: str) -> None:
    """Make a withdrawn product available again."""
    _update(ctx, product_id, available=True)
    click.echo(f"Product {product_id} restored.")
