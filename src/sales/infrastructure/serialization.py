"""Plain-dict encoding of value objects.

Shared by the JSON repositories (purchases embed their offer) and by the
CLI, which hands offers to the caller and reads them back on confirm.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from sales.domain.exceptions import ValidationError
from sales.domain.model.offer import Offer, OfferItem
from sales.domain.model.value_objects import AggregateId, Money


def money_to_raw(money: Money) -> dict:
    return {"amount": str(money.amount), "currency": money.currency}


def money_from_raw(raw: dict) -> Money:
    return Money(Decimal(raw["amount"]), raw.get("currency", "USD"))


def offer_to_raw(offer: Offer) -> dict:
    return {
        "total_cost": money_to_raw(offer.total_cost),
        "items": [
            {
                "product_id": item.product_id.value,
                "product_name": item.product_name,
                "unit_price": money_to_raw(item.unit_price),
                "quantity": item.quantity,
                "discount": money_to_raw(item.discount),
                "discount_cause": item.discount_cause,
            }
            for item in offer.items
        ],
    }


def offer_from_raw(raw: dict) -> Offer:
    """Rebuild an Offer, keeping the total exactly as it was sent."""
    try:
        items = tuple(
            OfferItem(
                product_id=AggregateId(i["product_id"]),
                product_name=i["product_name"],
                unit_price=money_from_raw(i["unit_price"]),
                quantity=int(i["quantity"]),
                discount=money_from_raw(i["discount"]),
                discount_cause=i.get("discount_cause", ""),
            )
            for i in raw["items"]
        )
        return Offer(items=items, total_cost=money_from_raw(raw["total_cost"]))
    except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
        raise ValidationError(f"Malformed offer: {exc}") from exc
