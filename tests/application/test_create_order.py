"""Integration tests for the CreateOrder use case.

Uses in-memory fakes — no file I/O.
"""

import pytest

from sales.application.create_order import CreateOrderHandler
from sales.application.unit_of_work import Isolation
from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.client import Client
from sales.domain.model.reservation import ReservationStatus
from sales.domain.model.value_objects import AggregateId, Money
from tests.fakes import FakeSystemUser, FakeUnitOfWork


def _setup() -> tuple[CreateOrderHandler, FakeUnitOfWork, Client]:
    alice = Client.register("Alice", Money.of("100"))
    uow = FakeUnitOfWork(clients=[alice])
    return CreateOrderHandler(uow, FakeSystemUser(alice.id)), uow, alice


class TestCreateOrder:

    def test_creates_open_reservation_owned_by_acting_client(self):
        handler, uow, alice = _setup()

        order_id = handler.handle()

        reservation = uow.reservations.get_by_id(order_id)
        assert reservation is not None
        assert reservation.client_id == alice.id
        assert reservation.status == ReservationStatus.OPEN
        assert reservation.items == []

    def test_commits_with_default_isolation(self):
        handler, uow, _ = _setup()
        handler.handle()
        assert uow.commits == 1
        assert uow.isolations == [Isolation.READ_COMMITTED]

    def test_sequential_orders_get_distinct_ids(self):
        handler, _, _ = _setup()
        assert handler.handle() != handler.handle()

    def test_unknown_acting_user_rejected(self):
        _, uow, _ = _setup()
        handler = CreateOrderHandler(uow, FakeSystemUser(AggregateId("ghost")))

        with pytest.raises(EntityNotFoundError, match="Client ghost not found"):
            handler.handle()
        assert uow.reservations.save_count == 0
