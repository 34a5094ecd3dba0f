"""JSON-backed implementation of ClientRepository."""

from __future__ import annotations

from decimal import Decimal

from sales.domain.model.client import Client, ClientTier
from sales.domain.model.value_objects import AggregateId, Money
from sales.domain.repository.client_repository import ClientRepository
from sales.infrastructure.persistence.json_store import JsonSession


class JsonClientRepository(ClientRepository):

    _COLLECTION = "clients"

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    def get_by_id(self, client_id: AggregateId) -> Client | None:
        raw = self._session.get(self._COLLECTION, client_id.value)
        return None if raw is None else self._to_domain(raw)

    def save(self, client: Client) -> None:
        self._session.put(self._COLLECTION, client.id.value, self._to_raw(client))

    @staticmethod
    def _to_raw(client: Client) -> dict:
        return {
            "id": client.id.value,
            "name": client.name,
            "balance": str(client.balance.amount),
            "currency": client.balance.currency,
            "tier": client.tier.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Client:
        return Client(
            id=AggregateId(raw["id"]),
            name=raw["name"],
            balance=Money(Decimal(raw["balance"]), raw.get("currency", "USD")),
            tier=ClientTier(raw.get("tier", ClientTier.STANDARD.value)),
        )
