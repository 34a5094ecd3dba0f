"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderDetails:
    """Input: what the client adds when confirming an order."""

    delivery_address: str = ""
    comment: str = ""


@dataclass(frozen=True)
class ReservationLineDTO:
    """Output: a single reserved product as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class ReservationDTO:
    """Output: an order as displayed to the user, before any discount."""

    id: str
    client_id: str
    status: str
    items: list[ReservationLineDTO]
    regular_total: str
    created_at: str


@dataclass(frozen=True)
class PaymentDTO:
    id: str
    amount: str
    created_at: str


@dataclass(frozen=True)
class PurchaseDTO:
    id: str
    reservation_id: str
    status: str
    total: str


@dataclass(frozen=True)
class ClientDTO:
    """Output: a client with the money it has spent so far."""

    id: str
    name: str
    tier: str
    balance: str
    purchases: list[PurchaseDTO]
    payments: list[PaymentDTO]
