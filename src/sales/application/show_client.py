"""Application service: Show Client use case (query)."""

from __future__ import annotations

from sales.application.dto import ClientDTO, PaymentDTO, PurchaseDTO
from sales.application.unit_of_work import UnitOfWork
from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.value_objects import AggregateId


class ShowClientHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, client_id: AggregateId) -> ClientDTO:
        with self._uow.transaction() as uow:
            client = uow.clients.get_by_id(client_id)
            if client is None:
                raise EntityNotFoundError(f"Client {client_id} not found")

            purchases = uow.purchases.list_by_client(client_id)
            payments = uow.payments.list_by_client(client_id)

        return ClientDTO(
            id=str(client.id),
            name=client.name,
            tier=client.tier.value,
            balance=str(client.balance),
            purchases=[
                PurchaseDTO(
                    id=str(p.id),
                    reservation_id=str(p.reservation_id),
                    status=p.status.value,
                    total=str(p.total_cost),
                )
                for p in purchases
            ],
            payments=[
                PaymentDTO(
                    id=str(p.id),
                    amount=str(p.amount),
                    created_at=p.created_at.strftime("%Y-%m-%d %H:%M UTC"),
                )
                for p in payments
            ],
        )
