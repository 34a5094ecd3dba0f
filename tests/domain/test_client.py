"""Unit tests for the Client aggregate."""

import pytest

from sales.domain.exceptions import InsufficientFundsError, ValidationError
from sales.domain.model.client import Client, ClientTier
from sales.domain.model.value_objects import Money


def _client(balance: str = "1000.00") -> Client:
    return Client.register("Alice", Money.of(balance))


class TestClientRegistration:

    def test_register(self):
        client = Client.register("  Alice ", Money.of("50"), ClientTier.VIP)
        assert client.name == "Alice"
        assert client.balance == Money.of("50")
        assert client.tier == ClientTier.VIP

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Client.register(" ", Money.of("50"))


class TestClientCharge:

    def test_can_afford_up_to_balance(self):
        client = _client("100")
        assert client.can_afford(Money.of("100"))
        assert not client.can_afford(Money.of("100.01"))

    def test_charge_debits_balance_and_returns_payment(self):
        client = _client("1000")
        payment = client.charge(Money.of("360"))

        assert client.balance == Money.of("640")
        assert payment.amount == Money.of("360")
        assert payment.client_id == client.id

    def test_each_charge_creates_a_distinct_payment(self):
        client = _client("1000")
        assert client.charge(Money.of("1")).id != client.charge(Money.of("1")).id

    def test_charge_beyond_balance_rejected(self):
        client = _client("100")
        with pytest.raises(InsufficientFundsError, match="cannot afford"):
            client.charge(Money.of("150"))
        assert client.balance == Money.of("100")
