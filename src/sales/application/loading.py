"""Lookups shared by the ordering use cases."""

from __future__ import annotations

from sales.application.system_user import SystemUser
from sales.application.unit_of_work import UnitOfWork
from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.client import Client
from sales.domain.model.reservation import Reservation
from sales.domain.model.value_objects import AggregateId


def load_reservation(uow: UnitOfWork, order_id: AggregateId) -> Reservation:
    reservation = uow.reservations.get_by_id(order_id)
    if reservation is None:
        raise EntityNotFoundError(f"Order {order_id} not found")
    return reservation


def load_current_client(uow: UnitOfWork, system_user: SystemUser) -> Client:
    """Load the client behind the acting user, not the reservation owner."""
    user_id = system_user.current_user_id()
    client = uow.clients.get_by_id(user_id)
    if client is None:
        raise EntityNotFoundError(f"Client {user_id} not found")
    return client
