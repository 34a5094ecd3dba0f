"""Identity resolution: who is acting right now.

The acting user's id doubles as their client id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.value_objects import AggregateId


class SystemUser(ABC):

    @abstractmethod
    def current_user_id(self) -> AggregateId:
        """Return the id of the user on whose behalf the call runs."""


class StaticSystemUser(SystemUser):
    """A fixed user, e.g. taken from the command line or configuration."""

    def __init__(self, user_id: AggregateId) -> None:
        self._user_id = user_id

    def current_user_id(self) -> AggregateId:
        return self._user_id
