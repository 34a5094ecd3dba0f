"""Offer value object: a priced snapshot of a reservation.

An Offer is produced by ``Reservation.calculate_offer()``, handed to the
caller, and later sent back with the confirmation.  It is never stored
between those two steps; the server recomputes a fresh offer and compares
the two with ``same_as()`` to detect stale prices.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from sales.domain.exceptions import ValidationError
from sales.domain.model.value_objects import AggregateId, Money

DEFAULT_OFFER_DELTA = Decimal("5")


@dataclass(frozen=True)
class Discount:
    """Amount taken off a line's regular cost, with a human-readable cause."""

    value: Money
    cause: str = ""


@dataclass(frozen=True)
class OfferItem:
    product_id: AggregateId
    product_name: str
    unit_price: Money
    quantity: int
    discount: Money
    discount_cause: str = ""

    @property
    def regular_cost(self) -> Money:
        return self.unit_price * self.quantity

    @property
    def total_cost(self) -> Money:
        return self.regular_cost - self.discount

    def same_as(self, other: OfferItem, delta: Decimal) -> bool:
        if self.product_id != other.product_id or self.quantity != other.quantity:
            return False
        if self.unit_price.currency != other.unit_price.currency:
            return False
        return self.total_cost.distance_to(other.total_cost) <= delta


@dataclass(frozen=True)
class Offer:
    """Immutable priced snapshot: ordered line items plus their total."""

    items: tuple[OfferItem, ...]
    total_cost: Money

    @staticmethod
    def of(items: list[OfferItem], currency: str = "USD") -> Offer:
        """Build an offer whose total is the sum of its line totals."""
        total = Money.zero(currency)
        for item in items:
            total = total + item.total_cost
        return Offer(items=tuple(items), total_cost=total)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def same_as(self, other: Offer, delta: int | Decimal = DEFAULT_OFFER_DELTA) -> bool:
        """Approximate equality used for the staleness check.

        Offers with different line counts or product sets are never the
        same.  Matching lines must agree on quantity and differ in total by
        at most *delta*; so must the offer totals.
        """
        tolerance = Decimal(str(delta))
        if tolerance < 0:
            raise ValidationError(f"Offer delta cannot be negative, got {delta}")

        if len(self.items) != len(other.items):
            return False
        if self.total_cost.currency != other.total_cost.currency:
            return False
        if self.total_cost.distance_to(other.total_cost) > tolerance:
            return False

        theirs = {item.product_id: item for item in other.items}
        if len(theirs) != len(other.items):
            return False
        for item in self.items:
            counterpart = theirs.get(item.product_id)
            if counterpart is None or not item.same_as(counterpart, tolerance):
                return False
        return True
