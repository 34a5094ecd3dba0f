"""Abstract repository for Client aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.client import Client
from sales.domain.model.value_objects import AggregateId


class ClientRepository(ABC):

    @abstractmethod
    def get_by_id(self, client_id: AggregateId) -> Client | None:
        """Return a client by its ID, or None if not found."""

    @abstractmethod
    def save(self, client: Client) -> None:
        """Persist a new or updated client."""
