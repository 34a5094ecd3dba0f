"""In-memory fakes for testing.

The repositories implement the same abstract interfaces as the JSON
repositories but keep everything in a dict.  They store and hand out
copies, so an aggregate mutated by a use case only changes the store
when it is saved, just like real persistence.

FakeUnitOfWork snapshots every store when a transaction begins and puts
the snapshot back on rollback.
"""

from __future__ import annotations

import copy

from sales.application.system_user import SystemUser
from sales.application.unit_of_work import Isolation, UnitOfWork
from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.client import Client
from sales.domain.model.payment import Payment
from sales.domain.model.product import Product
from sales.domain.model.purchase import Purchase
from sales.domain.model.reservation import Reservation
from sales.domain.model.value_objects import AggregateId
from sales.domain.repository.client_repository import ClientRepository
from sales.domain.repository.payment_repository import PaymentRepository
from sales.domain.repository.product_repository import ProductRepository
from sales.domain.repository.purchase_repository import PurchaseRepository
from sales.domain.repository.reservation_repository import ReservationRepository
from sales.domain.service.suggestion_service import SuggestionService


class _InMemoryStore:

    def __init__(self, entities=None) -> None:
        self._store: dict[AggregateId, object] = {}
        self.save_count = 0
        for entity in entities or []:
            self._store[entity.id] = copy.deepcopy(entity)

    def _get(self, entity_id: AggregateId):
        return copy.deepcopy(self._store.get(entity_id))

    def _put(self, entity) -> None:
        self.save_count += 1
        self._store[entity.id] = copy.deepcopy(entity)

    def _values(self) -> list:
        return [copy.deepcopy(e) for e in self._store.values()]


class FakeClientRepository(_InMemoryStore, ClientRepository):

    def get_by_id(self, client_id: AggregateId) -> Client | None:
        return self._get(client_id)

    def save(self, client: Client) -> None:
        self._put(client)


class FakeReservationRepository(_InMemoryStore, ReservationRepository):

    def get_by_id(self, reservation_id: AggregateId) -> Reservation | None:
        return self._get(reservation_id)

    def save(self, reservation: Reservation) -> None:
        self._put(reservation)


class FakeProductRepository(_InMemoryStore, ProductRepository):

    def get_by_id(self, product_id: AggregateId) -> Product | None:
        return self._get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return self._values()

    def save(self, product: Product) -> None:
        self._put(product)


class FakePurchaseRepository(_InMemoryStore, PurchaseRepository):

    def get_by_id(self, purchase_id: AggregateId) -> Purchase | None:
        return self._get(purchase_id)

    def list_by_client(self, client_id: AggregateId) -> list[Purchase]:
        return [p for p in self._values() if p.client_id == client_id]

    def save(self, purchase: Purchase) -> None:
        self._put(purchase)


class FakePaymentRepository(_InMemoryStore, PaymentRepository):

    def get_by_id(self, payment_id: AggregateId) -> Payment | None:
        return self._get(payment_id)

    def list_by_client(self, client_id: AggregateId) -> list[Payment]:
        return [p for p in self._values() if p.client_id == client_id]

    def save(self, payment: Payment) -> None:
        self._put(payment)


class FakeUnitOfWork(UnitOfWork):

    def __init__(
        self,
        clients: list[Client] | None = None,
        reservations: list[Reservation] | None = None,
        products: list[Product] | None = None,
    ) -> None:
        self.clients = FakeClientRepository(clients)
        self.reservations = FakeReservationRepository(reservations)
        self.products = FakeProductRepository(products)
        self.purchases = FakePurchaseRepository()
        self.payments = FakePaymentRepository()
        self.commits = 0
        self.rollbacks = 0
        self.isolations: list[Isolation] = []
        self._snapshot: dict[str, dict] = {}

    @property
    def save_count(self) -> int:
        return sum(repo.save_count for repo in self._repositories().values())

    def _repositories(self) -> dict[str, _InMemoryStore]:
        return {
            "clients": self.clients,
            "reservations": self.reservations,
            "products": self.products,
            "purchases": self.purchases,
            "payments": self.payments,
        }

    def _begin(self, isolation: Isolation) -> None:
        self.isolations.append(isolation)
        self._snapshot = {
            name: copy.deepcopy(repo._store) for name, repo in self._repositories().items()
        }

    def _commit(self) -> None:
        self.commits += 1

    def _rollback(self) -> None:
        self.rollbacks += 1
        for name, repo in self._repositories().items():
            repo._store = self._snapshot[name]


class FakeSystemUser(SystemUser):

    def __init__(self, user_id: AggregateId) -> None:
        self.user_id = user_id

    def current_user_id(self) -> AggregateId:
        return self.user_id


class FakeSuggestionService(SuggestionService):
    """Always suggests the same product and remembers who asked."""

    def __init__(self, suggestion: Product | None = None) -> None:
        self._suggestion = suggestion
        self.calls: list[tuple[Product, Client]] = []

    def suggest_equivalent(self, product: Product, client: Client) -> Product:
        self.calls.append((product, client))
        if self._suggestion is None:
            raise EntityNotFoundError(f"No available equivalent for product '{product.name}'")
        return self._suggestion
