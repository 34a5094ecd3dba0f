"""Application service: Update Product use case."""

from __future__ import annotations

from sales.application.unit_of_work import UnitOfWork
from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.product import Product
from sales.domain.model.value_objects import AggregateId, Money


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: AggregateId,
        new_price: str | None = None,
        available: bool | None = None,
    ) -> Product:
        """Change a product's price and/or availability.

        Reservations keep the price they captured when the product was
        added, so only reservations made afterwards see the new price.
        """
        with self._uow.transaction() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product {product_id} not found")

            if new_price is not None:
                product.update_price(Money.of(new_price))
            if available is True:
                product.restore()
            elif available is False:
                product.withdraw()

            uow.products.save(product)
        return product
