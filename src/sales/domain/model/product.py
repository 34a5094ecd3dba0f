"""Product aggregate.

Products live independently of reservations. They have their own
lifecycle: prices change, products are withdrawn from and restored to
the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from sales.domain.exceptions import ValidationError
from sales.domain.model.value_objects import AggregateId, Money


@dataclass
class Product:
    """A product in the catalog.

    Reservations copy the price when a product is added to them, so
    changing the price here never touches existing reservations.
    """

    id: AggregateId
    name: str
    price: Money
    category: str = "general"
    available: bool = True

    def is_available(self) -> bool:
        return self.available

    def update_price(self, new_price: Money) -> None:
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def withdraw(self) -> None:
        """Mark the product as no longer available for new reservations."""
        self.available = False

    def restore(self) -> None:
        self.available = True
