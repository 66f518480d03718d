"""Mock providers for testing."""

from .collaborator import MockCollaboratorProvider
from .persistence import MockPersistenceProvider
from .scheduler import MockSchedulerProvider
from .container import build_test_container

__all__ = [
    "MockCollaboratorProvider",
    "MockPersistenceProvider",
    "MockSchedulerProvider",
    "build_test_container",
]
