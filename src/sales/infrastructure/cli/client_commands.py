"""CLI commands for the Client aggregate."""

from __future__ import annotations

import click

from sales.application.register_client import RegisterClientHandler
from sales.application.show_client import ShowClientHandler
from sales.domain.exceptions import DomainException
from sales.domain.model.client import ClientTier
from sales.domain.model.value_objects import AggregateId
from sales.infrastructure.cli.context import CliContext


@click.command("register")
@click.option("--name", required=True, help="Client name.")
@click.option("--balance", required=True, help="Opening balance (e.g. 1000.00).")
@click.option(
    "--tier",
    type=click.Choice([t.value for t in ClientTier], case_sensitive=False),
    default=ClientTier.STANDARD.value,
    show_default=True,
)
@click.pass_obj
def client_register(ctx: CliContext, name: str, balance: str, tier: str) -> None:
    """Register a new client."""
    handler = RegisterClientHandler(uow=ctx.unit_of_work())

    try:
        client = handler.handle(name=name, opening_balance=balance, tier=tier)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client {client.id} '{client.name}' registered with {client.balance}")


@click.command("show")
@click.option("--id", "client_id", default=None, help="Client ID (defaults to the acting user).")
@click.pass_obj
def client_show(ctx: CliContext, client_id: str | None) -> None:
    """Show a client's balance, purchases and payments."""
    handler = ShowClientHandler(uow=ctx.unit_of_work())

    try:
        dto = handler.handle(AggregateId(client_id or ctx.acting_user()))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client {dto.id}  ({dto.name}, {dto.tier})")
    click.echo(f"Balance: {dto.balance}")

    if dto.purchases:
        click.echo()
        click.echo(f"  {'Purchase':<34} {'Order':<34} {'Status':<10} {'Total':>10}")
        for p in dto.purchases:
            click.echo(f"  {p.id:<34} {p.reservation_id:<34} {p.status:<10} {p.total:>10}")

    if dto.payments:
        click.echo()
        click.echo(f"  {'Payment':<34} {'Date':<22} {'Amount':>10}")
        for p in dto.payments:
            click.echo(f"  {p.id:<34} {p.created_at:<22} {p.amount:>10}")
