"""Unit tests for provider selection."""

import pytest

from agora.config import VoteSettings
from agora.domain.service import OptimisticVoteFactory
from agora.domain.value import VoteType
from agora.util.di import (
    InMemoryPersistenceProvider,
    PersistenceProvider,
    ProdDomainProvider,
    ProdPersistenceProvider,
    get_provider,
)
from agora.util.error import DependencyInjectionError
from tests.di import build_test_container, make_test_settings


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        """Providers without implementations should be used directly."""
        assert get_provider(ProdDomainProvider, use_mock=True) is ProdDomainProvider

    def test_persistence_selects_by_flag(self):
        """The flag should choose between PostgreSQL and in-memory persistence."""
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is InMemoryPersistenceProvider

    def test_unknown_component_is_rejected(self):
        """Unmocking a component nobody declares should fail fast."""
        with pytest.raises(DependencyInjectionError, match="Unknown components"):
            build_test_container(unmock={"search"})


class TestOptimisticVoteWiring:
    """Tests for the optimistic vote factory provider."""

    @pytest.mark.asyncio
    async def test_confirmation_window_comes_from_settings(self):
        """VOTES__CONFIRMATION_WINDOW_MS should reach the scheduled delay."""
        # Arrange
        settings = make_test_settings(votes=VoteSettings(confirmation_window_ms=1200))
        container = build_test_container(settings=settings)
        delays = []

        class RecordingScheduler:
            def call_later(self, delay, callback):
                delays.append(delay)
                return self

            def cancel(self):
                pass

        # Act
        factory = await container.get(OptimisticVoteFactory)
        factory.create(scheduler=RecordingScheduler()).vote(VoteType.DOWNVOTE)
        await container.close()

        # Assert
        assert factory.confirmation_window_ms == 1200
        assert delays == [pytest.approx(1.2)]
