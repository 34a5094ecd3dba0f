"""Application service: Calculate Offer use case (query).

Can be invoked many times for the same order.  The discount comes from the
acting client, so two users looking at one order may see different
offers.  The resulting Offer is not stored; the caller keeps it and sends
it back on confirmation.
"""

from __future__ import annotations

from sales.application.loading import load_current_client, load_reservation
from sales.application.system_user import SystemUser
from sales.application.unit_of_work import UnitOfWork
from sales.domain.model.offer import Offer
from sales.domain.model.value_objects import AggregateId
from sales.domain.service.discount import DiscountFactory


class CalculateOfferHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        system_user: SystemUser,
        discount_factory: DiscountFactory,
    ) -> None:
        self._uow = uow
        self._system_user = system_user
        self._discount_factory = discount_factory

    def handle(self, order_id: AggregateId) -> Offer:
        with self._uow.transaction() as uow:
            reservation = load_reservation(uow, order_id)
            policy = self._discount_factory.create(
                load_current_client(uow, self._system_user)
            )
            return reservation.calculate_offer(policy)
