"""JSON-backed implementation of ReservationRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sales.domain.model.reservation import Reservation, ReservationStatus, ReservedProduct
from sales.domain.model.value_objects import AggregateId, Money
from sales.domain.repository.reservation_repository import ReservationRepository
from sales.infrastructure.persistence.json_store import JsonSession


class JsonReservationRepository(ReservationRepository):

    _COLLECTION = "reservations"

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    # --- ReservationRepository interface --------------------------------------

    def get_by_id(self, reservation_id: AggregateId) -> Reservation | None:
        raw = self._session.get(self._COLLECTION, reservation_id.value)
        return None if raw is None else self._to_domain(raw)

    def save(self, reservation: Reservation) -> None:
        self._session.put(self._COLLECTION, reservation.id.value, self._to_raw(reservation))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(reservation: Reservation) -> dict:
        return {
            "id": reservation.id.value,
            "client_id": reservation.client_id.value,
            "status": reservation.status.value,
            "created_at": reservation.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id.value,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in reservation.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Reservation:
        items = [
            ReservedProduct(
                product_id=AggregateId(i["product_id"]),
                product_name=i["product_name"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                quantity=i["quantity"],
            )
            for i in raw["items"]
        ]
        return Reservation(
            id=AggregateId(raw["id"]),
            client_id=AggregateId(raw["client_id"]),
            items=items,
            status=ReservationStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
