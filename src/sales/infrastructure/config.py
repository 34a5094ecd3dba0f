"""Runtime configuration.

Values come from the process environment, optionally seeded from a
``.env`` file in the working directory:

- ``SALES_DATA_DIR``     directory holding the JSON store (default ``./data``)
- ``SALES_USER``         id of the acting user/client
- ``SALES_OFFER_DELTA``  tolerance used when comparing offers (default 5)
- ``SALES_ENV``          development | test | staging | production
- ``LOG_LEVEL``          overrides the level derived from ``SALES_ENV``
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from sales.domain.exceptions import ValidationError
from sales.domain.model.offer import DEFAULT_OFFER_DELTA

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    current_user: str | None
    offer_delta: Decimal
    environment: str
    log_level: str

    @property
    def store_path(self) -> Path:
        return self.data_dir / "sales.json"

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()

        environment = os.getenv("SALES_ENV", "development").lower()
        raw_delta = os.getenv("SALES_OFFER_DELTA")
        try:
            offer_delta = Decimal(raw_delta) if raw_delta else DEFAULT_OFFER_DELTA
        except InvalidOperation as exc:
            raise ValidationError(
                f"SALES_OFFER_DELTA must be a number, got {raw_delta!r}"
            ) from exc
        if offer_delta < 0:
            raise ValidationError(f"SALES_OFFER_DELTA cannot be negative, got {offer_delta}")

        return cls(
            data_dir=Path(os.getenv("SALES_DATA_DIR", "data")).resolve(),
            current_user=os.getenv("SALES_USER") or None,
            offer_delta=offer_delta,
            environment=environment,
            log_level=os.getenv("LOG_LEVEL", _LEVELS_BY_ENV.get(environment, "INFO")).upper(),
        )
