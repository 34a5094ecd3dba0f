"""Application service: Register Client use case."""

from __future__ import annotations

import structlog

from sales.application.unit_of_work import UnitOfWork
from sales.domain.exceptions import ValidationError
from sales.domain.model.client import Client, ClientTier
from sales.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)


class RegisterClientHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, opening_balance: str, tier: str = "STANDARD") -> Client:
        try:
            client_tier = ClientTier(tier.upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown client tier: {tier!r}") from exc

        client = Client.register(name, Money.of(opening_balance), client_tier)
        with self._uow.transaction() as uow:
            uow.clients.save(client)

        logger.info("Client registered", client_id=str(client.id), tier=client_tier.value)
        return client
