"""Domain layer DI providers."""

from dishka import Scope, provide

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
from agora.domain.service import (
    AnalyticsService,
    CommentService,
    ModerationService,
    NotificationService,
    OptimisticVoteFactory,
    PostService,
    SearchService,
    SubredditService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository)

    @provide
    def get_subreddit_service(
        self, subreddit_repository: SubredditRepository, settings: Settings
    ) -> SubredditService:
        """Provide subreddit domain service with the configured reserved names."""
        return SubredditService(
            subreddit_repository,
            reserved_names=settings.communities.reserved_names,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository, post_repository, notification_service)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository, post_repository, comment_repository)

    @provide
    def get_moderation_service(
        self,
        moderation_repository: ModerationRepository,
        comment_service: CommentService,
        notification_service: NotificationService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            moderation_repository, comment_service, notification_service
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository, post_repository, comment_repository, vote_repository
        )

    @provide
    def get_search_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        subreddit_repository: SubredditRepository,
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(post_repository, comment_repository, subreddit_repository)

    @provide
    def get_analytics_service(
        self,
        subreddit_repository: SubredditRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(
            subreddit_repository, post_repository, comment_repository, vote_repository
        )

    @provide(scope=Scope.APP)
    def get_optimistic_vote_factory(self, settings: Settings) -> OptimisticVoteFactory:
        """Provide optimistic votes with VOTES__CONFIRMATION_WINDOW_MS applied."""
        return OptimisticVoteFactory(settings.votes.confirmation_window_ms)
