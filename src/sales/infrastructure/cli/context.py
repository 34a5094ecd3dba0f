"""State shared by every CLI command of one invocation."""

from __future__ import annotations

from dataclasses import dataclass

import click

from sales.application.ordering_service import OrderingService
from sales.infrastructure import bootstrap
from sales.infrastructure.config import Settings
from sales.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


@dataclass
class CliContext:
    settings: Settings
    user_id: str | None = None

    def acting_user(self) -> str:
        if not self.user_id:
            raise click.UsageError("No acting user: pass --user or set SALES_USER.")
        return self.user_id

    def unit_of_work(self) -> JsonUnitOfWork:
        return bootstrap.unit_of_work(self.settings)

    def ordering_service(self) -> OrderingService:
        return bootstrap.ordering_service(self.settings, self.acting_user())
