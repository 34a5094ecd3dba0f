"""UnitOfWork over a JsonStore.

Each ``transaction()`` opens a fresh JsonTransaction and rebinds the
repositories to it, so nothing is written until the block commits.
"""

from __future__ import annotations

from sales.application.unit_of_work import Isolation, UnitOfWork
from sales.infrastructure.persistence.json_client_repository import JsonClientRepository
from sales.infrastructure.persistence.json_payment_repository import JsonPaymentRepository
from sales.infrastructure.persistence.json_product_repository import JsonProductRepository
from sales.infrastructure.persistence.json_purchase_repository import JsonPurchaseRepository
from sales.infrastructure.persistence.json_reservation_repository import (
    JsonReservationRepository,
)
from sales.infrastructure.persistence.json_store import JsonStore, JsonTransaction


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonStore) -> None:
        self._store = store
        self._tx: JsonTransaction | None = None

    def _begin(self, isolation: Isolation) -> None:
        self._tx = self._store.begin(isolation)
        self.clients = JsonClientRepository(self._tx)
        self.reservations = JsonReservationRepository(self._tx)
        self.products = JsonProductRepository(self._tx)
        self.purchases = JsonPurchaseRepository(self._tx)
        self.payments = JsonPaymentRepository(self._tx)

    def _commit(self) -> None:
        self._tx.commit()

    def _rollback(self) -> None:
        if self._tx is not None:
            self._tx.rollback()
