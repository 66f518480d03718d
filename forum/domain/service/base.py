"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    Services own in-memory state for the lifetime of their container and
    write through to the persistence gateway after every mutation.
    """

    pass
