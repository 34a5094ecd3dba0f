"""Reservation aggregate: the basket a client builds before buying.

The Reservation owns its lines exclusively.  Each line keeps a snapshot of
the product price taken when the product was first added.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from sales.domain.exceptions import AlreadyClosedError, InvalidOperationError
from sales.domain.model.offer import Offer, OfferItem
from sales.domain.model.product import Product
from sales.domain.model.value_objects import AggregateId, Money


class ReservationStatus(Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass
class ReservedProduct:
    product_id: AggregateId
    product_name: str
    unit_price: Money  # snapshot taken on first add
    quantity: int

    @property
    def regular_cost(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Reservation:
    """Aggregate root for a client's open order.

    Use ``Reservation.create()`` for new reservations; ``__init__`` stays
    plain so repositories can reconstitute persisted state.
    """

    id: AggregateId
    client_id: AggregateId
    items: list[ReservedProduct] = field(default_factory=list)
    status: ReservationStatus = ReservationStatus.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(client_id: AggregateId) -> Reservation:
        return Reservation(id=AggregateId.generate(), client_id=client_id)

    # --- Commands -------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> None:
        """Add *quantity* units of *product*, merging with an existing line."""
        if self.is_closed():
            raise InvalidOperationError(self.id, "Reservation is already closed")
        if quantity <= 0:
            raise InvalidOperationError(self.id, "Quantity must be positive")
        if not product.is_available():
            raise InvalidOperationError(
                self.id, f"Product '{product.name}' is no longer available"
            )

        line = self._find_line(product.id)
        if line is not None:
            line.quantity += quantity
            return

        self.items.append(
            ReservedProduct(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=quantity,
            )
        )

    def close(self) -> None:
        """Transition OPEN -> CLOSED.  Closing twice is an error."""
        if self.is_closed():
            raise AlreadyClosedError(self.id, "Reservation is already closed")
        self.status = ReservationStatus.CLOSED

    # --- Queries --------------------------------------------------------------

    def is_closed(self) -> bool:
        return self.status == ReservationStatus.CLOSED

    def contains(self, product_id: AggregateId) -> bool:
        return self._find_line(product_id) is not None

    def quantity_of(self, product_id: AggregateId) -> int:
        line = self._find_line(product_id)
        return line.quantity if line is not None else 0

    @property
    def regular_total(self) -> Money:
        total = Money.zero(self._currency())
        for line in self.items:
            total = total + line.regular_cost
        return total

    def calculate_offer(self, discount_policy) -> Offer:
        """Price every line through *discount_policy*.

        Pure: reads the current lines and returns a new Offer without
        touching the reservation, so it can be called any number of times
        with different policies.
        """
        offer_items: list[OfferItem] = []
        for line in self.items:
            regular_cost = line.regular_cost
            discount = discount_policy.apply_discount(
                line.product_id, line.quantity, regular_cost
            )
            offer_items.append(
                OfferItem(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    discount=discount.value,
                    discount_cause=discount.cause,
                )
            )
        return Offer.of(offer_items, self._currency())

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: AggregateId) -> ReservedProduct | None:
        for line in self.items:
            if line.product_id == product_id:
                return line
        return None

    def _currency(self) -> str:
        return self.items[0].unit_price.currency if self.items else "USD"
