"""JSON-backed implementation of PaymentRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sales.domain.model.payment import Payment
from sales.domain.model.value_objects import AggregateId, Money
from sales.domain.repository.payment_repository import PaymentRepository
from sales.infrastructure.persistence.json_store import JsonSession


class JsonPaymentRepository(PaymentRepository):

    _COLLECTION = "payments"

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    def get_by_id(self, payment_id: AggregateId) -> Payment | None:
        raw = self._session.get(self._COLLECTION, payment_id.value)
        return None if raw is None else self._to_domain(raw)

    def list_by_client(self, client_id: AggregateId) -> list[Payment]:
        payments = [
            self._to_domain(raw)
            for raw in self._session.all(self._COLLECTION)
            if raw["client_id"] == client_id.value
        ]
        return sorted(payments, key=lambda p: p.created_at)

    def save(self, payment: Payment) -> None:
        self._session.put(self._COLLECTION, payment.id.value, self._to_raw(payment))

    @staticmethod
    def _to_raw(payment: Payment) -> dict:
        return {
            "id": payment.id.value,
            "client_id": payment.client_id.value,
            "amount": str(payment.amount.amount),
            "currency": payment.amount.currency,
            "created_at": payment.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Payment:
        return Payment(
            id=AggregateId(raw["id"]),
            client_id=AggregateId(raw["client_id"]),
            amount=Money(Decimal(raw["amount"]), raw.get("currency", "USD")),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
