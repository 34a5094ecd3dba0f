"""Abstract repository for Reservation aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.reservation import Reservation
from sales.domain.model.value_objects import AggregateId


class ReservationRepository(ABC):

    @abstractmethod
    def get_by_id(self, reservation_id: AggregateId) -> Reservation | None:
        """Return a reservation by its ID, or None if not found."""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """Persist a new or updated reservation."""
