"""JSON-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from sales.domain.model.product import Product
from sales.domain.model.value_objects import AggregateId, Money
from sales.domain.repository.product_repository import ProductRepository
from sales.infrastructure.persistence.json_store import JsonSession


class JsonProductRepository(ProductRepository):

    _COLLECTION = "products"

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: AggregateId) -> Product | None:
        raw = self._session.get(self._COLLECTION, product_id.value)
        return None if raw is None else self._to_domain(raw)

    def get_by_name(self, name: str) -> Product | None:
        for product in self.list_all():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._session.all(self._COLLECTION)]
        return sorted(products, key=lambda p: p.name.lower())

    def save(self, product: Product) -> None:
        self._session.put(self._COLLECTION, product.id.value, self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id.value,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "category": product.category,
            "available": product.available,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=AggregateId(raw["id"]),
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            category=raw.get("category", "general"),
            available=raw.get("available", True),
        )
