"""Client aggregate: the party that owns reservations and pays for them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sales.domain.exceptions import InsufficientFundsError, ValidationError
from sales.domain.model.payment import Payment
from sales.domain.model.value_objects import AggregateId, Money


class ClientTier(Enum):
    STANDARD = "STANDARD"
    VIP = "VIP"


@dataclass
class Client:
    """Aggregate root for a buying client.

    Invariants:
    - ``balance`` is never negative
    - every successful ``charge()`` yields exactly one Payment
    """

    id: AggregateId
    name: str
    balance: Money
    tier: ClientTier = ClientTier.STANDARD

    @staticmethod
    def register(name: str, opening_balance: Money, tier: ClientTier = ClientTier.STANDARD) -> Client:
        if not name or not name.strip():
            raise ValidationError("Client name is required")
        return Client(
            id=AggregateId.generate(),
            name=name.strip(),
            balance=opening_balance,
            tier=tier,
        )

    def can_afford(self, amount: Money) -> bool:
        return amount <= self.balance

    def charge(self, amount: Money) -> Payment:
        """Debit *amount* and return the resulting Payment.

        The workflow checks ``can_afford()`` first; this check repeats it so
        the balance can never go negative.
        """
        if not self.can_afford(amount):
            raise InsufficientFundsError(
                self.id,
                f"Client {self.name} cannot afford {amount} (balance {self.balance})",
            )
        self.balance = self.balance - amount
        return Payment(id=AggregateId.generate(), client_id=self.id, amount=amount)
