"""JSON-backed implementation of PurchaseRepository.

The agreed offer is stored inside the purchase record.
"""

from __future__ import annotations

from datetime import datetime

from sales.domain.model.purchase import Purchase, PurchaseStatus
from sales.domain.model.value_objects import AggregateId
from sales.domain.repository.purchase_repository import PurchaseRepository
from sales.infrastructure.persistence.json_store import JsonSession
from sales.infrastructure.serialization import offer_from_raw, offer_to_raw


class JsonPurchaseRepository(PurchaseRepository):

    _COLLECTION = "purchases"

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    def get_by_id(self, purchase_id: AggregateId) -> Purchase | None:
        raw = self._session.get(self._COLLECTION, purchase_id.value)
        return None if raw is None else self._to_domain(raw)

    def list_by_client(self, client_id: AggregateId) -> list[Purchase]:
        purchases = [
            self._to_domain(raw)
            for raw in self._session.all(self._COLLECTION)
            if raw["client_id"] == client_id.value
        ]
        return sorted(purchases, key=lambda p: p.created_at)

    def save(self, purchase: Purchase) -> None:
        self._session.put(self._COLLECTION, purchase.id.value, self._to_raw(purchase))

    @staticmethod
    def _to_raw(purchase: Purchase) -> dict:
        return {
            "id": purchase.id.value,
            "reservation_id": purchase.reservation_id.value,
            "client_id": purchase.client_id.value,
            "status": purchase.status.value,
            "created_at": purchase.created_at.isoformat(),
            "confirmed_at": (
                purchase.confirmed_at.isoformat() if purchase.confirmed_at else None
            ),
            "offer": offer_to_raw(purchase.offer),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Purchase:
        confirmed_at = raw.get("confirmed_at")
        return Purchase(
            id=AggregateId(raw["id"]),
            reservation_id=AggregateId(raw["reservation_id"]),
            client_id=AggregateId(raw["client_id"]),
            offer=offer_from_raw(raw["offer"]),
            status=PurchaseStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            confirmed_at=datetime.fromisoformat(confirmed_at) if confirmed_at else None,
        )
