"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Rejected input, raised before any state is touched."""

    pass


class AuthRequiredError(DomainError):
    """Raised when a mutating operation is attempted without an actor.

    Callers are expected to route the user to sign-in; it is never retried.
    """

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Sign in required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StorageCorruptionError(DomainError):
    """A stored record could not be decoded.

    Only raised inside the persistence layer; the gateway logs it and
    discards the record instead of surfacing it.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Corrupted record under {key!r}: {reason}")
