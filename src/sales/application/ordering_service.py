"""Ordering facade: the public contract of the ordering workflow.

Callers see *orders*; reservations, purchases and payments stay hidden
behind these four operations.
"""

from __future__ import annotations

from decimal import Decimal

from sales.application.add_to_order import AddToOrderHandler
from sales.application.calculate_offer import CalculateOfferHandler
from sales.application.confirm_order import ConfirmOrderHandler
from sales.application.create_order import CreateOrderHandler
from sales.application.dto import OrderDetails
from sales.application.system_user import SystemUser
from sales.application.unit_of_work import UnitOfWork
from sales.domain.model.offer import DEFAULT_OFFER_DELTA, Offer
from sales.domain.model.value_objects import AggregateId
from sales.domain.service.discount import DiscountFactory
from sales.domain.service.suggestion_service import SuggestionService


class OrderingService:

    def __init__(
        self,
        uow: UnitOfWork,
        system_user: SystemUser,
        discount_factory: DiscountFactory,
        suggestion_service: SuggestionService,
        offer_delta: Decimal = DEFAULT_OFFER_DELTA,
    ) -> None:
        self._create = CreateOrderHandler(uow, system_user)
        self._add = AddToOrderHandler(uow, system_user, suggestion_service)
        self._offer = CalculateOfferHandler(uow, system_user, discount_factory)
        self._confirm = ConfirmOrderHandler(uow, system_user, discount_factory, offer_delta)

    def create_order(self) -> AggregateId:
        return self._create.handle()

    def add_product(self, order_id: AggregateId, product_id: AggregateId, quantity: int) -> None:
        self._add.handle(order_id, product_id, quantity)

    def calculate_offer(self, order_id: AggregateId) -> Offer:
        return self._offer.handle(order_id)

    def confirm(
        self,
        order_id: AggregateId,
        order_details: OrderDetails,
        seen_offer: Offer,
    ) -> None:
        """Confirm the order at the price of *seen_offer*.

        Raises OfferChangedError when the current offer drifted more than the
        configured delta, and TransactionConflictError when a concurrent
        transaction got there first (safe to retry).
        """
        self._confirm.handle(order_id, order_details, seen_offer)
