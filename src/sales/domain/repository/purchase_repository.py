"""Abstract repository for Purchase aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.purchase import Purchase
from sales.domain.model.value_objects import AggregateId


class PurchaseRepository(ABC):

    @abstractmethod
    def get_by_id(self, purchase_id: AggregateId) -> Purchase | None:
        """Return a purchase by its ID, or None if not found."""

    @abstractmethod
    def list_by_client(self, client_id: AggregateId) -> list[Purchase]:
        """Return every purchase made by a client."""

    @abstractmethod
    def save(self, purchase: Purchase) -> None:
        """Persist a new or updated purchase."""
