"""Domain service: equivalent product suggestion.

Used when a client asks for a product that has been withdrawn from the
catalog.  The suggestion depends on the client: standard clients are
never moved to a more expensive product, VIP clients may be.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.client import Client, ClientTier
from sales.domain.model.product import Product
from sales.domain.repository.product_repository import ProductRepository


class SuggestionService(ABC):

    @abstractmethod
    def suggest_equivalent(self, product: Product, client: Client) -> Product:
        """Return an available product that can stand in for *product*."""


class CatalogSuggestionService(SuggestionService):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def suggest_equivalent(self, product: Product, client: Client) -> Product:
        """Pick the available same-category product closest in price."""
        candidates = [
            p
            for p in self._product_repo.list_all()
            if p.id != product.id
            and p.is_available()
            and p.category == product.category
            and p.price.currency == product.price.currency
        ]
        if client.tier != ClientTier.VIP:
            candidates = [p for p in candidates if p.price <= product.price]

        if not candidates:
            raise EntityNotFoundError(
                f"No available equivalent for product '{product.name}'"
            )

        return min(
            candidates,
            key=lambda p: (p.price.distance_to(product.price), p.name),
        )
