"""Application service: Confirm Order use case.

Turns an open reservation into a confirmed, paid purchase.  Reservation,
purchase, payment and client are all written in one SERIALIZABLE
transaction: if any step fails, none of the writes survive.

Steps:
1. Load the reservation; a closed one cannot be confirmed again.
2. Recompute the offer with the acting client's discount.
3. Compare it with the offer the client saw (within ``offer_delta``).
4. Create a purchase for the acting client at the *seen* offer's price.
5. Save the purchase, then check the client can afford it.
6. Charge the client and save the payment.
7. Confirm the purchase, close the reservation, save everything.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from sales.application.dto import OrderDetails
from sales.application.exceptions import OfferChangedError
from sales.application.loading import load_current_client, load_reservation
from sales.application.system_user import SystemUser
from sales.application.unit_of_work import Isolation, UnitOfWork
from sales.domain.exceptions import AlreadyClosedError, InsufficientFundsError
from sales.domain.model.offer import DEFAULT_OFFER_DELTA, Offer
from sales.domain.model.purchase import Purchase
from sales.domain.model.value_objects import AggregateId
from sales.domain.service.discount import DiscountFactory

logger = structlog.get_logger(__name__)


class ConfirmOrderHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        system_user: SystemUser,
        discount_factory: DiscountFactory,
        offer_delta: Decimal = DEFAULT_OFFER_DELTA,
    ) -> None:
        self._uow = uow
        self._system_user = system_user
        self._discount_factory = discount_factory
        self._offer_delta = offer_delta

    def handle(
        self,
        order_id: AggregateId,
        order_details: OrderDetails,
        seen_offer: Offer,
    ) -> None:
        with self._uow.transaction(Isolation.SERIALIZABLE) as uow:
            reservation = load_reservation(uow, order_id)
            if reservation.is_closed():
                raise AlreadyClosedError(reservation.id, "Reservation is already closed")

            # The acting client, not the reservation owner, gets the discount and pays.
            client = load_current_client(uow, self._system_user)

            new_offer = reservation.calculate_offer(self._discount_factory.create(client))
            if not new_offer.same_as(seen_offer, self._offer_delta):
                raise OfferChangedError(reservation.id, new_offer, seen_offer)

            purchase = Purchase.create(reservation.id, client, seen_offer)
            # Saved before charging: listeners of the charge may load it.
            uow.purchases.save(purchase)

            if not client.can_afford(purchase.total_cost):
                raise InsufficientFundsError(client.id, "Client has insufficient money")

            payment = client.charge(purchase.total_cost)
            uow.payments.save(payment)

            purchase.confirm()
            reservation.close()

            uow.purchases.save(purchase)
            uow.reservations.save(reservation)
            uow.clients.save(client)

        logger.info(
            "Order confirmed",
            order_id=str(order_id),
            client_id=str(client.id),
            purchase_id=str(purchase.id),
            payment_id=str(payment.id),
            total=str(purchase.total_cost),
            delivery_address=order_details.delivery_address,
            comment=order_details.comment,
        )
