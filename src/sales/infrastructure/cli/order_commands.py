"""CLI commands for orders."""

from __future__ import annotations

import json
from pathlib import Path

import click

from sales.application.dto import OrderDetails
from sales.application.exceptions import OfferChangedError
from sales.application.show_order import ShowOrderHandler
from sales.domain.exceptions import DomainException
from sales.domain.model.offer import Offer
from sales.domain.model.value_objects import AggregateId
from sales.infrastructure.cli.context import CliContext
from sales.infrastructure.serialization import offer_from_raw, offer_to_raw


def _display_offer(offer: Offer) -> None:
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Discount':>10} {'Total':>10}")
    click.echo(f"  {'-'*59}")
    for item in offer.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {str(item.unit_price):>10} "
            f"{str(item.discount):>10} {str(item.total_cost):>10}"
        )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Offer Total':<27} {str(offer.total_cost):>32}")


@click.command("create")
@click.pass_obj
def order_create(ctx: CliContext) -> None:
    """Open a new, empty order for the acting user."""
    try:
        order_id = ctx.ordering_service().create_order()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} created  (status=OPEN)")


@click.command("add-product")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to reserve.")
@click.pass_obj
def order_add_product(ctx: CliContext, order_id: str, product_id: str, quantity: int) -> None:
    """Reserve a product; withdrawn products are replaced by an equivalent."""
    try:
        ctx.ordering_service().add_product(
            AggregateId(order_id), AggregateId(product_id), quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} x product {product_id} to order {order_id}")


@click.command("offer")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the offer as JSON, to be passed back to 'order confirm'.",
)
@click.pass_obj
def order_offer(ctx: CliContext, order_id: str, out_path: Path | None) -> None:
    """Price the order for the acting user."""
    try:
        offer = ctx.ordering_service().calculate_offer(AggregateId(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Offer for order {order_id}")
    click.echo()
    _display_offer(offer)

    if out_path is not None:
        out_path.write_text(json.dumps(offer_to_raw(offer), indent=2) + "\n", encoding="utf-8")
        click.echo()
        click.echo(f"Offer saved to {out_path}")


@click.command("confirm")
@click.option("--id", "order_id", required=True, help="Order ID to confirm.")
@click.option(
    "--offer",
    "offer_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Offer JSON written by 'order offer --out'.",
)
@click.option("--address", default="", help="Delivery address.")
@click.option("--comment", default="", help="Free-text comment.")
@click.pass_obj
def order_confirm(
    ctx: CliContext, order_id: str, offer_path: Path, address: str, comment: str
) -> None:
    """Confirm an order at the price of a previously fetched offer."""
    try:
        seen_offer = offer_from_raw(json.loads(offer_path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Offer file is not valid JSON: {exc}", param_hint="--offer")
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="--offer")

    try:
        ctx.ordering_service().confirm(
            AggregateId(order_id),
            OrderDetails(delivery_address=address, comment=comment),
            seen_offer,
        )
    except OfferChangedError as exc:
        raise click.ClickException(f"{exc}. Fetch a fresh offer and confirm again.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} confirmed — charged {seen_offer.total_cost}.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(ctx: CliContext, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(uow=ctx.unit_of_work())

    try:
        dto = handler.handle(AggregateId(order_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Client:  {dto.client_id}")
    click.echo(f"Created: {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Regular Total':<27} {dto.regular_total:>20}")
