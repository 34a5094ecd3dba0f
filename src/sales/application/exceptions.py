"""Application-level exceptions.

These are raised by use cases rather than by a single aggregate, but they
still derive from DomainException so the CLI handles every failure the
same way.
"""

from __future__ import annotations

from sales.domain.exceptions import DomainException


class OfferChangedError(DomainException):
    """The offer the client saw no longer matches the current one.

    Expected and user-actionable: fetch a fresh offer and confirm again.
    """

    def __init__(self, order_id, new_offer, seen_offer) -> None:
        super().__init__(
            f"Offer for order {order_id} has changed: "
            f"seen {seen_offer.total_cost}, now {new_offer.total_cost}"
        )
        self.order_id = order_id
        self.new_offer = new_offer
        self.seen_offer = seen_offer


class TransactionConflictError(DomainException):
    """A serializable transaction could not commit.

    Nothing from the failed transaction was written, so the whole use case
    can safely be retried from the start.
    """
