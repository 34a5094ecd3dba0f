"""Unit tests for the Purchase aggregate."""

import pytest

from sales.domain.exceptions import DomainOperationError, InvalidStateError
from sales.domain.model.client import Client
from sales.domain.model.offer import Offer, OfferItem
from sales.domain.model.purchase import Purchase, PurchaseStatus
from sales.domain.model.value_objects import AggregateId, Money


def _offer(total: str = "360.00") -> Offer:
    return Offer.of([
        OfferItem(
            product_id=AggregateId("widget"),
            product_name="Widget",
            unit_price=Money.of(total),
            quantity=1,
            discount=Money.zero(),
        )
    ])


def _client() -> Client:
    return Client.register("Alice", Money.of("1000"))


class TestPurchaseCreation:

    def test_create_binds_reservation_client_and_offer(self):
        client = _client()
        offer = _offer()
        purchase = Purchase.create(AggregateId("order-1"), client, offer)

        assert purchase.status == PurchaseStatus.PENDING
        assert purchase.reservation_id == AggregateId("order-1")
        assert purchase.client_id == client.id
        assert purchase.offer is offer

    def test_total_cost_comes_from_offer(self):
        purchase = Purchase.create(AggregateId("order-1"), _client(), _offer("123.45"))
        assert purchase.total_cost == Money.of("123.45")

    def test_empty_offer_rejected(self):
        with pytest.raises(DomainOperationError, match="without items"):
            Purchase.create(AggregateId("order-1"), _client(), Offer.of([]))


class TestPurchaseConfirm:

    def test_confirm(self):
        purchase = Purchase.create(AggregateId("order-1"), _client(), _offer())
        purchase.confirm()
        assert purchase.is_confirmed()
        assert purchase.confirmed_at is not None

    def test_confirm_twice_rejected(self):
        purchase = Purchase.create(AggregateId("order-1"), _client(), _offer())
        purchase.confirm()
        with pytest.raises(InvalidStateError, match="expected PENDING"):
            purchase.confirm()
