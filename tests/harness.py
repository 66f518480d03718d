"""Test harness for building per-test forum environments."""

import pytest

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Every test gets its own container, so APP-scoped services (thread and
    comment working copies, the deletion ledger, the fake clock) never leak
    between tests.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields a request-scoped Container

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Real asyncio scheduler
        loop_env = create_env_fixture(unmock={"scheduler"})

        def test_create_thread(unit_env):
            thread_service = unit_env.get(ThreadService)
            ...
    """

    @pytest.fixture
    def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        with container() as request_container:
            yield request_container

        container.close()

    return _test_environment
