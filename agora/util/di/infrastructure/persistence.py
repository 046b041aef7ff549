"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agora.config import Settings
from agora.domain.repository import (
    CommentRepository,
    ModerationRepository,
    NotificationRepository,
    PostRepository,
    SubredditRepository,
    UserRepository,
    VoteRepository,
)
from agora.persistence.database import create_engine, create_session_factory
from agora.persistence.repository import (
    PostgresCommentRepository,
    PostgresModerationRepository,
    PostgresNotificationRepository,
    PostgresPostRepository,
    PostgresSubredditRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from agora.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryModerationRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemorySubredditRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from agora.persistence.seed import seed_demo_subreddit, seed_demo_user
from agora.util.di.base import ProviderBase
from agora.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subreddit_repository(self, session: AsyncSession) -> SubredditRepository:
        """Provide Subreddit repository."""
        return PostgresSubredditRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_moderation_repository(self, session: AsyncSession) -> ModerationRepository:
        """Provide ModerationAction repository."""
        return PostgresModerationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)


class InMemoryPersistenceProvider(PersistenceProvider):
    """Persistence provider keeping everything in process memory.

    Repositories are APP-scoped so data survives across requests for the
    lifetime of the container. Used when no database URL is configured and
    by the test suite, where each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    async def get_user_repository(self, settings: Settings) -> UserRepository:
        """Provide in-memory user repository, seeded when configured."""
        repository = InMemoryUserRepository()
        if settings.seed_demo_data:
            await seed_demo_user(repository)
        return repository

    @provide(scope=Scope.APP)
    async def get_subreddit_repository(
        self, settings: Settings
    ) -> SubredditRepository:
        """Provide in-memory subreddit repository, seeded when configured."""
        repository = InMemorySubredditRepository()
        if settings.seed_demo_data:
            await seed_demo_subreddit(repository)
        return repository

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_moderation_repository(self) -> ModerationRepository:
        """Provide in-memory moderation repository."""
        return InMemoryModerationRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()
