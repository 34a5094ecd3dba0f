"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from sales.application.ordering_service import OrderingService
from sales.application.system_user import StaticSystemUser
from sales.application.unit_of_work import UnitOfWorkProductRepository
from sales.domain.model.value_objects import AggregateId
from sales.domain.service.discount import TierDiscountFactory
from sales.domain.service.suggestion_service import CatalogSuggestionService
from sales.infrastructure.config import Settings
from sales.infrastructure.persistence.json_product_repository import JsonProductRepository
from sales.infrastructure.persistence.json_store import JsonStore
from sales.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


@lru_cache(maxsize=None)
def _store_for(path: Path) -> JsonStore:
    return JsonStore(path)


def store(settings: Settings) -> JsonStore:
    return _store_for(settings.store_path)


def unit_of_work(settings: Settings) -> JsonUnitOfWork:
    return JsonUnitOfWork(store(settings))


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(store(settings))


def ordering_service(settings: Settings, user_id: str) -> OrderingService:
    uow = unit_of_work(settings)
    return OrderingService(
        uow=uow,
        system_user=StaticSystemUser(AggregateId(user_id)),
        discount_factory=TierDiscountFactory(),
        suggestion_service=CatalogSuggestionService(UnitOfWorkProductRepository(uow)),
        offer_delta=settings.offer_delta,
    )
