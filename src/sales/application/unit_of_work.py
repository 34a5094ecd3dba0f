"""Unit of Work — the transaction boundary for use cases.

A use case that touches several aggregates opens one transaction and goes
through the repositories exposed here.  Either every save inside the
``with`` block is committed, or none is.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import structlog

from sales.domain.model.product import Product
from sales.domain.model.value_objects import AggregateId
from sales.domain.repository.client_repository import ClientRepository
from sales.domain.repository.payment_repository import PaymentRepository
from sales.domain.repository.product_repository import ProductRepository
from sales.domain.repository.purchase_repository import PurchaseRepository
from sales.domain.repository.reservation_repository import ReservationRepository

logger = structlog.get_logger(__name__)


class Isolation(Enum):
    READ_COMMITTED = "READ_COMMITTED"
    SERIALIZABLE = "SERIALIZABLE"


class UnitOfWork(ABC):

    clients: ClientRepository
    reservations: ReservationRepository
    products: ProductRepository
    purchases: PurchaseRepository
    payments: PaymentRepository

    @contextmanager
    def transaction(
        self, isolation: Isolation = Isolation.READ_COMMITTED
    ) -> Iterator[UnitOfWork]:
        """Run the ``with`` block as one transaction.

        Commits when the block exits normally.  Any exception, including a
        failed commit, rolls back and is re-raised unchanged.
        """
        self._begin(isolation)
        try:
            yield self
            self._commit()
        except Exception as exc:
            self._rollback()
            logger.info(
                "Transaction rolled back",
                isolation=isolation.value,
                error=type(exc).__name__,
            )
            raise

    @abstractmethod
    def _begin(self, isolation: Isolation) -> None:
        """Start a transaction and bind the repositories to it."""

    @abstractmethod
    def _commit(self) -> None:
        """Make every staged write durable, or raise TransactionConflictError."""

    @abstractmethod
    def _rollback(self) -> None:
        """Discard every staged write.  Must be safe after a failed commit."""


class UnitOfWorkProductRepository(ProductRepository):
    """Product reads through whatever transaction *uow* has open.

    Lets a collaborator built once at start-up, such as the suggestion
    service, see the same data as the use case that calls it.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get_by_id(self, product_id: AggregateId) -> Product | None:
        return self._uow.products.get_by_id(product_id)

    def get_by_name(self, name: str) -> Product | None:
        return self._uow.products.get_by_name(name)

    def list_all(self) -> list[Product]:
        return self._uow.products.list_all()

    def save(self, product: Product) -> None:
        self._uow.products.save(product)
