"""Unit tests for the Reservation aggregate."""

import copy
from decimal import Decimal

import pytest

from sales.domain.exceptions import AlreadyClosedError, InvalidOperationError
from sales.domain.model.product import Product
from sales.domain.model.reservation import Reservation, ReservationStatus
from sales.domain.model.value_objects import AggregateId, Money
from sales.domain.service.discount import NoDiscount, PercentageDiscount


def _product(name: str = "Widget", price: str = "15.00", available: bool = True) -> Product:
    return Product(
        id=AggregateId(name.lower()),
        name=name,
        price=Money.of(price),
        available=available,
    )


def _reservation() -> Reservation:
    return Reservation.create(AggregateId("alice"))


class TestReservationCreation:

    def test_new_reservation_is_open_and_empty(self):
        reservation = _reservation()
        assert reservation.status == ReservationStatus.OPEN
        assert reservation.items == []
        assert reservation.client_id == AggregateId("alice")

    def test_each_reservation_gets_its_own_id(self):
        assert _reservation().id != _reservation().id


class TestReservationAdd:

    def test_add_new_line_snapshots_price(self):
        reservation = _reservation()
        widget = _product()
        reservation.add(widget, 3)

        widget.update_price(Money.of("99.00"))

        assert reservation.quantity_of(widget.id) == 3
        assert reservation.items[0].unit_price == Money.of("15.00")

    @pytest.mark.parametrize("first, second", [(1, 1), (2, 5), (10, 3)])
    def test_add_same_product_increases_line(self, first, second):
        reservation = _reservation()
        widget = _product()
        reservation.add(widget, first)
        reservation.add(widget, second)

        assert len(reservation.items) == 1
        assert reservation.quantity_of(widget.id) == first + second

    @pytest.mark.parametrize("quantity", [0, -1, -50])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(InvalidOperationError, match="must be positive"):
            _reservation().add(_product(), quantity)

    def test_unavailable_product_rejected(self):
        with pytest.raises(InvalidOperationError, match="no longer available"):
            _reservation().add(_product(available=False), 1)

    @pytest.mark.parametrize("quantity", [1, 2, 100])
    def test_add_to_closed_reservation_rejected(self, quantity):
        reservation = _reservation()
        reservation.close()
        with pytest.raises(InvalidOperationError, match="already closed"):
            reservation.add(_product(), quantity)
        assert reservation.items == []


class TestReservationClose:

    def test_close(self):
        reservation = _reservation()
        reservation.close()
        assert reservation.is_closed()

    def test_close_twice_rejected(self):
        reservation = _reservation()
        reservation.close()
        with pytest.raises(AlreadyClosedError) as exc_info:
            reservation.close()
        assert exc_info.value.aggregate_id == reservation.id


class TestCalculateOffer:

    def test_offer_without_discount(self):
        reservation = _reservation()
        reservation.add(_product("Widget", "15.00"), 2)
        reservation.add(_product("Gadget", "25.00"), 1)

        offer = reservation.calculate_offer(NoDiscount())

        assert offer.total_cost == Money.of("55.00")
        assert [item.product_name for item in offer.items] == ["Widget", "Gadget"]

    def test_offer_with_percentage_discount(self):
        reservation = _reservation()
        reservation.add(_product("Widget", "200.00"), 2)

        offer = reservation.calculate_offer(PercentageDiscount(Decimal("0.10")))

        assert offer.items[0].discount == Money.of("40.00")
        assert offer.total_cost == Money.of("360.00")

    def test_calculate_offer_is_pure(self):
        reservation = _reservation()
        reservation.add(_product(), 2)
        before = copy.deepcopy((reservation.items, reservation.status))

        first = reservation.calculate_offer(NoDiscount())
        reservation.calculate_offer(PercentageDiscount(Decimal("0.5")))
        second = reservation.calculate_offer(NoDiscount())

        assert first == second
        assert (reservation.items, reservation.status) == before

    def test_empty_reservation_gives_empty_offer(self):
        offer = _reservation().calculate_offer(NoDiscount())
        assert offer.is_empty
        assert offer.total_cost == Money.zero()

    def test_regular_total(self):
        reservation = _reservation()
        reservation.add(_product("Widget", "15.00"), 3)
        assert reservation.regular_total == Money.of("45.00")

    def test_totals_follow_line_currency(self):
        reservation = _reservation()
        reservation.add(
            Product(id=AggregateId("lamp"), name="Lamp", price=Money.of("20.00", "EUR")), 2
        )

        offer = reservation.calculate_offer(PercentageDiscount(Decimal("0.10")))

        assert reservation.regular_total == Money.of("40.00", "EUR")
        assert offer.total_cost == Money.of("36.00", "EUR")
