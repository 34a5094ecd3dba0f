"""Application service: Add Product to Order use case.

Steps:
1. Load the reservation and the product.
2. If the product is no longer available, ask the suggestion service
   for an equivalent chosen for the *acting* client.
3. Let the reservation add the (possibly substituted) product.
4. Persist the reservation.
"""

from __future__ import annotations

import structlog

from sales.application.loading import load_current_client, load_reservation
from sales.application.system_user import SystemUser
from sales.application.unit_of_work import UnitOfWork
from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.value_objects import AggregateId
from sales.domain.service.suggestion_service import SuggestionService

logger = structlog.get_logger(__name__)


class AddToOrderHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        system_user: SystemUser,
        suggestion_service: SuggestionService,
    ) -> None:
        self._uow = uow
        self._system_user = system_user
        self._suggestion_service = suggestion_service

    def handle(self, order_id: AggregateId, product_id: AggregateId, quantity: int) -> None:
        with self._uow.transaction() as uow:
            reservation = load_reservation(uow, order_id)

            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product {product_id} not found")

            if not product.is_available():
                client = load_current_client(uow, self._system_user)
                substitute = self._suggestion_service.suggest_equivalent(product, client)
                logger.info(
                    "Unavailable product substituted",
                    order_id=str(order_id),
                    requested=str(product.id),
                    substitute=str(substitute.id),
                )
                product = substitute

            reservation.add(product, quantity)
            uow.reservations.save(reservation)

        logger.info(
            "Product added to order",
            order_id=str(order_id),
            product_id=str(product.id),
            quantity=quantity,
        )
