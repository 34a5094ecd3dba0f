"""Payment entity: funds debited from a client.

Created by ``Client.charge()`` and never changed afterwards.  The client
does not manage payments, so the application persists them itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from sales.domain.model.value_objects import AggregateId, Money


@dataclass(frozen=True)
class Payment:
    id: AggregateId
    client_id: AggregateId
    amount: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
