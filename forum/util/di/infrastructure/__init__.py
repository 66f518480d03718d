"""Infrastructure providers."""

# Import bases
from .collaborator import CollaboratorProvider
from .persistence import PersistenceProvider
from .scheduler import SchedulerProvider

# Import implementations (needed for __subclasses__())
from .collaborator import ProdCollaboratorProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .scheduler import ProdSchedulerProvider  # noqa: F401

__all__ = [
    "CollaboratorProvider",
    "PersistenceProvider",
    "ProdCollaboratorProvider",
    "ProdPersistenceProvider",
    "ProdSchedulerProvider",
    "SchedulerProvider",
]
