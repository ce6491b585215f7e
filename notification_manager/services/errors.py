"""Exceptions raised by the service layer.

The HTTP layer maps these onto status codes:
ValidationError -> 400, NotFoundError -> 404, IntegrityError -> 500,
StoreError -> 400 for constraint violations, 500 otherwise.
"""


class NotificationError(Exception):
    """Base exception for notification manager operations."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(NotificationError):
    """Caller-supplied input is invalid, or a referenced entity is missing or inactive."""
    pass


class InvalidTransitionError(ValidationError):
    """Lifecycle transition not allowed from the current state."""
    pass


class NotFoundError(NotificationError):
    """Directly requested entity does not exist or is deleted."""
    pass


class IntegrityError(NotificationError):
    """An owning entity that must exist is missing. Indicates data corruption."""
    pass


class StoreError(NotificationError):
    """Backing store failure."""

    def __init__(
        self,
        message: str,
        *,
        detail: str | None = None,
        constraint_violation: bool = False,
    ):
        super().__init__(message)
        self.detail = detail
        self.constraint_violation = constraint_violation
