"""Application service: Create Order use case.

An order starts life as an empty, open Reservation owned by the acting
client.
"""

from __future__ import annotations

import structlog

from sales.application.loading import load_current_client
from sales.application.system_user import SystemUser
from sales.application.unit_of_work import UnitOfWork
from sales.domain.model.reservation import Reservation
from sales.domain.model.value_objects import AggregateId

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork, system_user: SystemUser) -> None:
        self._uow = uow
        self._system_user = system_user

    def handle(self) -> AggregateId:
        with self._uow.transaction() as uow:
            client = load_current_client(uow, self._system_user)
            reservation = Reservation.create(client.id)
            uow.reservations.save(reservation)

        logger.info("Order created", order_id=str(reservation.id), client_id=str(client.id))
        return reservation.id
