"""Abstract repository for Payment entities.

Payments are written once and never updated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.payment import Payment
from sales.domain.model.value_objects import AggregateId


class PaymentRepository(ABC):

    @abstractmethod
    def get_by_id(self, payment_id: AggregateId) -> Payment | None:
        """Return a payment by its ID, or None if not found."""

    @abstractmethod
    def list_by_client(self, client_id: AggregateId) -> list[Payment]:
        """Return every payment charged to a client."""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """Persist a new payment."""
