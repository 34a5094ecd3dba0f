"""Application service: Show Order use case (query)."""

from __future__ import annotations

from sales.application.dto import ReservationDTO, ReservationLineDTO
from sales.application.loading import load_reservation
from sales.application.unit_of_work import UnitOfWork
from sales.domain.model.reservation import Reservation
from sales.domain.model.value_objects import AggregateId


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: AggregateId) -> ReservationDTO:
        with self._uow.transaction() as uow:
            return self._to_dto(load_reservation(uow, order_id))

    @staticmethod
    def _to_dto(reservation: Reservation) -> ReservationDTO:
        return ReservationDTO(
            id=str(reservation.id),
            client_id=str(reservation.client_id),
            status=reservation.status.value,
            items=[
                ReservationLineDTO(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=str(item.unit_price),
                    line_total=str(item.regular_cost),
                )
                for item in reservation.items
            ],
            regular_total=str(reservation.regular_total),
            created_at=reservation.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
