"""Unit tests for provider selection and container wiring."""

import pytest

from forum.adapter.scheduler import AsyncioScheduler, ManualScheduler
from forum.application.usecase.thread import CreateThreadUseCase
from forum.domain.repository import StorageGateway
from forum.domain.service import DeletionService, Scheduler, ThreadService
from forum.persistence.gateway import PersistenceGateway
from forum.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    SchedulerProvider,
    get_provider,
)
from forum.util.di.container import create_container
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider function."""

    def test_concrete_provider_returned_as_is(self):
        """Providers without implementations are used directly."""
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_by_mock_flag(self):
        """Mockable components resolve to the mock or production subclass."""
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider


class TestBuildTestContainer:
    """Tests for build_test_container function."""

    def test_unknown_component_rejected(self):
        """Only declared components can be unmocked."""
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"database"})

    def test_unmocked_scheduler_uses_event_loop(self):
        """Unmocking the scheduler swaps the fake clock for the real one."""
        container = build_test_container(unmock={"scheduler"})
        try:
            assert isinstance(container.get(Scheduler), AsyncioScheduler)
        finally:
            container.close()

    def test_default_uses_fake_clock(self):
        """All components are mocked by default."""
        container = build_test_container()
        try:
            assert isinstance(container.get(Scheduler), ManualScheduler)
        finally:
            container.close()

    def test_gateway_port_and_seed_threads_injected(self, monkeypatch):
        """Domain services get the gateway port and the configured demo threads."""
        # Arrange
        monkeypatch.setenv("SEED__ENABLED", "true")
        container = build_test_container()

        try:
            # Act
            gateway = container.get(StorageGateway)
            threads = container.get(ThreadService)

            # Assert
            assert isinstance(gateway, PersistenceGateway)
            assert threads.gateway is gateway
            assert {t.id for t in threads.seeds} == {"1", "2", "3", "4"}
        finally:
            container.close()


class TestCreateContainer:
    """Tests for the production container."""

    def test_resolves_services_and_use_cases(self):
        """Every layer resolves with production providers."""
        # Arrange
        container = create_container()

        try:
            # Act
            with container() as request_container:
                use_case = request_container.get(CreateThreadUseCase)

            # Assert
            assert isinstance(container.get(Scheduler), AsyncioScheduler)
            assert use_case.thread_service is container.get(ThreadService)
            assert container.get(DeletionService).grace_period == 5.0
        finally:
            container.close()

    def test_scheduler_component_declared(self):
        """The scheduler is a mockable component."""
        assert SchedulerProvider.__mock_component__ == "scheduler"
