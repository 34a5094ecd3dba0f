"""Purchase aggregate: a confirmed transaction bound to an agreed offer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from sales.domain.exceptions import DomainOperationError, InvalidStateError
from sales.domain.model.client import Client
from sales.domain.model.offer import Offer
from sales.domain.model.value_objects import AggregateId, Money


class PurchaseStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"


@dataclass
class Purchase:
    """Aggregate root for purchases.

    ``reservation_id`` only points back at the reservation the purchase
    came from; the purchase does not own it.  The total cost always comes
    from the offer snapshot and is never recomputed.
    """

    id: AggregateId
    reservation_id: AggregateId
    client_id: AggregateId
    offer: Offer
    status: PurchaseStatus = PurchaseStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    confirmed_at: datetime | None = None

    @staticmethod
    def create(reservation_id: AggregateId, client: Client, offer: Offer) -> Purchase:
        """Bind a new PENDING purchase to *client* at the price of *offer*."""
        if offer.is_empty:
            raise DomainOperationError(
                client.id, "Client cannot purchase an offer without items"
            )
        return Purchase(
            id=AggregateId.generate(),
            reservation_id=reservation_id,
            client_id=client.id,
            offer=offer,
        )

    @property
    def total_cost(self) -> Money:
        return self.offer.total_cost

    def is_confirmed(self) -> bool:
        return self.status == PurchaseStatus.CONFIRMED

    def confirm(self) -> None:
        """Transition PENDING -> CONFIRMED."""
        if self.status != PurchaseStatus.PENDING:
            raise InvalidStateError(
                self.id,
                f"Cannot confirm purchase — current status is {self.status.value}, "
                f"expected PENDING",
            )
        self.status = PurchaseStatus.CONFIRMED
        self.confirmed_at = datetime.now(timezone.utc)
