"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object or input could not be constructed."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DomainOperationError(DomainException):
    """An aggregate rejected an operation.

    Carries the id of the aggregate that refused, so callers can tell
    which of the aggregates touched by a use case was responsible.
    """

    def __init__(self, aggregate_id, message: str) -> None:
        super().__init__(message)
        self.aggregate_id = aggregate_id


class InvalidOperationError(DomainOperationError):
    """Mutation attempted on an aggregate that no longer accepts it."""


class AlreadyClosedError(InvalidOperationError):
    """The reservation has already been closed."""


class InvalidStateError(InvalidOperationError):
    """A lifecycle transition is not legal from the current state."""


class InsufficientFundsError(DomainOperationError):
    """The client cannot afford the requested amount."""
