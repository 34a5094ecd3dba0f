"""Domain service: discount policies.

A DiscountPolicy is a small, side-effect-free capability handed to
``Reservation.calculate_offer()``.  The DiscountFactory builds one for the
client who is *acting*, which is not necessarily the reservation owner.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal

from sales.domain.exceptions import ValidationError
from sales.domain.model.client import Client, ClientTier
from sales.domain.model.offer import Discount
from sales.domain.model.value_objects import AggregateId, Money


class DiscountPolicy(ABC):

    @abstractmethod
    def apply_discount(
        self, product_id: AggregateId, quantity: int, regular_cost: Money
    ) -> Discount:
        """Return the discount for one reservation line."""


class NoDiscount(DiscountPolicy):

    def apply_discount(
        self, product_id: AggregateId, quantity: int, regular_cost: Money
    ) -> Discount:
        return Discount(Money.zero(regular_cost.currency))


class PercentageDiscount(DiscountPolicy):
    """Takes a fixed fraction off every line, e.g. ``Decimal("0.10")``."""

    def __init__(self, rate: Decimal, cause: str = "") -> None:
        if not Decimal("0") <= rate <= Decimal("1"):
            raise ValidationError(f"Discount rate must be between 0 and 1, got {rate}")
        self._rate = rate
        self._cause = cause or f"{rate * 100:.0f}% discount"

    def apply_discount(
        self, product_id: AggregateId, quantity: int, regular_cost: Money
    ) -> Discount:
        return Discount(regular_cost * self._rate, self._cause)


class DiscountFactory(ABC):

    @abstractmethod
    def create(self, client: Client) -> DiscountPolicy:
        """Build the discount policy that applies to *client*."""


DEFAULT_TIER_RATES: Mapping[ClientTier, Decimal] = {
    ClientTier.STANDARD: Decimal("0"),
    ClientTier.VIP: Decimal("0.10"),
}


class TierDiscountFactory(DiscountFactory):
    """Picks a percentage discount from the client's tier."""

    def __init__(self, rates: Mapping[ClientTier, Decimal] | None = None) -> None:
        self._rates = dict(DEFAULT_TIER_RATES if rates is None else rates)

    def create(self, client: Client) -> DiscountPolicy:
        rate = self._rates.get(client.tier, Decimal("0"))
        if rate == 0:
            return NoDiscount()
        return PercentageDiscount(rate, cause=f"{client.tier.value} discount")
