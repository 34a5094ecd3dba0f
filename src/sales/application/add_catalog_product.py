"""Application service: Add Catalog Product use case."""

from __future__ import annotations

from sales.application.unit_of_work import UnitOfWork
from sales.domain.exceptions import ValidationError
from sales.domain.model.product import Product
from sales.domain.model.value_objects import AggregateId, Money


class AddCatalogProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: str, category: str = "general") -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=AggregateId.generate(),
            name=name.strip(),
            price=Money.of(price),
            category=category.strip() or "general",
        )
        if product.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")

        with self._uow.transaction() as uow:
            if uow.products.get_by_name(product.name) is not None:
                raise ValidationError(f"Product '{product.name}' already exists")
            uow.products.save(product)

        return product
